"""Shared test doubles: Settable value types and upload handles."""

from __future__ import annotations

import io
import re
from enum import StrEnum
from urllib.parse import SplitResult, urlsplit

from starlette.datastructures import Headers, UploadFile

from secureform.core.exceptions import CapabilityError

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class URL:
    """Absolute http(s) URL parsed by its own ``set``."""

    def __init__(self) -> None:
        self.parts: SplitResult | None = None

    def set(self, raw: str) -> None:
        if _BAD_ESCAPE.search(raw):
            raise CapabilityError(f"invalid URL escape in {raw!r}")
        parts = urlsplit(raw)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise CapabilityError(f"not an absolute http URL: {raw!r}")
        self.parts = parts

    def __str__(self) -> str:
        return self.parts.geturl() if self.parts else ""


class Color(StrEnum):
    RED = "red"
    GREEN = "green"


class ColorChoice:
    """Enumeration-backed value that raises a plain ValueError."""

    def __init__(self) -> None:
        self.value: Color | None = None

    def set(self, raw: str) -> None:
        self.value = Color(raw)


def make_upload(data: bytes, filename: str = "upload.bin", content_type: str = "application/octet-stream") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(data),
        size=len(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


__all__ = ["URL", "Color", "ColorChoice", "make_upload"]
