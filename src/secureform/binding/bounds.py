"""Inclusive min/max checks in the coerced value's own domain.

Bound literals are parsed lazily, only when a member is validated, so a
malformed literal surfaces as a NumericParseError for that member alone.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from secureform.binding.literals import parse_float, parse_int, parse_uint
from secureform.core.exceptions import BoundAboveMaximumError, BoundBelowMinimumError
from secureform.models.field_spec import FieldSpec

N = TypeVar("N", int, float)


def check_bounds(value: N, spec: FieldSpec, parse: Callable[[str], N]) -> None:
    if spec.min_literal is not None and value < parse(spec.min_literal):
        raise BoundBelowMinimumError()
    if spec.max_literal is not None and value > parse(spec.max_literal):
        raise BoundAboveMaximumError()


def validate_int(value: int, spec: FieldSpec) -> None:
    check_bounds(value, spec, lambda text: parse_int(text, prefixed=True))


def validate_uint(value: int, spec: FieldSpec) -> None:
    check_bounds(value, spec, lambda text: parse_uint(text, prefixed=True))


def validate_float(value: float, spec: FieldSpec) -> None:
    check_bounds(value, spec, parse_float)


def validate_string(value: str, spec: FieldSpec, max_length: int) -> None:
    """Check the UTF-8 byte length against the tag bounds, then the global cap."""
    length = len(value.encode("utf-8"))
    check_bounds(length, spec, lambda text: parse_int(text, prefixed=True))
    if length > max_length:
        raise BoundAboveMaximumError()
