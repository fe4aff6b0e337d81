"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from secureform.core.config import BindConfig, ParserSettings


def test_default_settings():
    settings = ParserSettings()
    assert settings.max_bytes == 10 << 20
    assert settings.max_memory == 32 << 20
    assert settings.max_string_length == 1024


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SECUREFORM_MAX_BYTES", "2048")
    monkeypatch.setenv("SECUREFORM_MAX_STRING_LENGTH", "64")
    settings = ParserSettings()
    assert settings.max_bytes == 2048
    assert settings.bind_config() == BindConfig(max_string_length=64)


def test_bind_config_is_frozen():
    config = BindConfig()
    with pytest.raises(ValidationError):
        config.max_string_length = 1


def test_bind_config_rejects_negative_length():
    with pytest.raises(ValidationError):
        BindConfig(max_string_length=-1)
