"""Binding and parser configuration using pydantic / pydantic-settings."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class BindConfig(BaseModel):
    """Immutable per-bind limits, safe to share across concurrent binds."""

    model_config = {"frozen": True}

    max_string_length: int = Field(default=1024, ge=0)


class ParserSettings(BaseSettings):
    """Transport limits for the request adapters."""

    model_config = {"env_prefix": "SECUREFORM_"}

    max_memory: int = Field(default=32 << 20, gt=0)  # largest in-memory form part
    max_bytes: int = Field(default=10 << 20, gt=0)  # request body cap
    max_string_length: int = Field(default=1024, ge=0)

    def bind_config(self) -> BindConfig:
        return BindConfig(max_string_length=self.max_string_length)
