"""Request adapter: body limits and form parsing in front of ``bind``."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from starlette.datastructures import FormData, UploadFile
from starlette.requests import Request
from starlette.types import Message, Receive

from secureform.binding.coerce import values_for
from secureform.binding.walker import bind
from secureform.core.config import BindConfig, ParserSettings
from secureform.core.exceptions import BodyTooLargeError

logger = logging.getLogger(__name__)


def _limited_receive(receive: Receive, limit: int) -> Receive:
    received = 0

    async def receive_limited() -> Message:
        nonlocal received
        message = await receive()
        if message["type"] == "http.request":
            received += len(message.get("body", b""))
            if received > limit:
                logger.warning("Request body exceeded %d bytes", limit)
                raise BodyTooLargeError(limit)
        return message

    return receive_limited


def split_form(form: Any) -> tuple[dict[str, list[str]], dict[str, list[UploadFile]]]:
    """Group a multi-valued form into string values and upload handles."""
    values: dict[str, list[str]] = {}
    files: dict[str, list[UploadFile]] = {}
    if hasattr(form, "multi_items"):
        items = form.multi_items()
    else:
        items = [(key, item) for key in form for item in values_for(form, key)]
    for key, item in items:
        if isinstance(item, UploadFile):
            files.setdefault(key, []).append(item)
        else:
            values.setdefault(key, []).append(item)
    return values, files


class Parser:
    """Security limits for parsing a form into a record.

    ``max_memory`` caps the size of a single in-memory form part,
    ``max_bytes`` caps the whole request body and ``max_string_length``
    caps every bound string value.
    """

    def __init__(self, max_memory: int, max_bytes: int, max_string_length: int) -> None:
        self.max_memory = max_memory
        self.max_bytes = max_bytes
        self._config = BindConfig(max_string_length=max_string_length)

    @classmethod
    def from_settings(cls, settings: ParserSettings | None = None) -> Parser:
        if settings is None:
            settings = ParserSettings()
        return cls(
            max_memory=settings.max_memory,
            max_bytes=settings.max_bytes,
            max_string_length=settings.max_string_length,
        )

    @property
    def config(self) -> BindConfig:
        return self._config

    async def parse(self, request: Request, destination: object) -> FormData:
        """Read the request form within limits and bind it into ``destination``.

        Query string values follow body values for the same key. Returns the
        parsed form; the caller closes it once the uploads are no longer needed.
        """
        content_length = request.headers.get("content-length")
        if content_length is not None and content_length.isdigit() and int(content_length) > self.max_bytes:
            logger.warning("Rejected request body of %s bytes, limit %d", content_length, self.max_bytes)
            raise BodyTooLargeError(self.max_bytes)

        limited = Request(request.scope, _limited_receive(request.receive, self.max_bytes))
        form = await limited.form(max_part_size=self.max_memory)

        values, files = split_form(form)
        for key, item in request.query_params.multi_items():
            values.setdefault(key, []).append(item)

        multipart = request.headers.get("content-type", "").lower().startswith("multipart/form-data")
        try:
            bind(destination, values, files if multipart else None, self._config)
        except Exception:
            await form.close()
            raise
        return form

    def parse_form(self, form: Mapping[str, Any], destination: object) -> None:
        """Bind ordinary (non-file) fields from an already parsed form."""
        values, _ = split_form(form)
        bind(destination, values, None, self._config)

    def parse_multipart(self, form: Mapping[str, Any], destination: object) -> None:
        """Bind string fields and file uploads from an already parsed multipart form."""
        values, files = split_form(form)
        bind(destination, values, files, self._config)
