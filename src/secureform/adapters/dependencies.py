"""FastAPI dependency that binds the request form into a fresh record."""

from __future__ import annotations

from typing import AsyncIterator, Callable, TypeVar

from fastapi import Request

from secureform.adapters.parser import Parser

T = TypeVar("T")


def form_dependency(model_cls: Callable[[], T], parser: Parser) -> Callable[[Request], AsyncIterator[T]]:
    """Build a dependency yielding ``model_cls()`` populated from the request.

    Binding errors propagate unchanged; map them to responses with an
    exception handler on the application.
    """

    async def dependency(request: Request) -> AsyncIterator[T]:
        destination = model_cls()
        form = await parser.parse(request, destination)
        try:
            yield destination
        finally:
            await form.close()

    return dependency
