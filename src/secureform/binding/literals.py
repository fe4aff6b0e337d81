"""Numeric literal parsing with fixed-width range checks."""

from __future__ import annotations

import math
import re
import struct

from secureform.core.exceptions import NumericParseError

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_DECIMAL_UINT = re.compile(r"[0-9]+")
_PREFIXED_INT = re.compile(
    r"[+-]?(?:0[xX](?:_?[0-9a-fA-F])+|0[oO](?:_?[0-7])+|0[bB](?:_?[01])+"
    r"|0(?:_?[0-7])*|[1-9](?:_?[0-9])*)"
)
_FLOAT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT_SPECIAL = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)

INVALID_SYNTAX = "invalid syntax"
OUT_OF_RANGE = "value out of range"


def int_range(bits: int, signed: bool) -> tuple[int, int]:
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def _prefixed_value(text: str) -> int:
    sign = -1 if text.startswith("-") else 1
    body = text.lstrip("+-")
    if body[:2].lower() in ("0x", "0o", "0b"):
        return sign * int(body, 0)
    if len(body) > 1 and body.startswith("0"):
        return sign * int(body, 8)
    return sign * int(body, 10)


def _parse_integer(text: str, bits: int, signed: bool, prefixed: bool) -> int:
    if prefixed:
        if not _PREFIXED_INT.fullmatch(text) or (not signed and text[:1] in "+-"):
            raise NumericParseError(text, INVALID_SYNTAX)
        value = _prefixed_value(text)
    else:
        pattern = _DECIMAL_INT if signed else _DECIMAL_UINT
        if not pattern.fullmatch(text):
            raise NumericParseError(text, INVALID_SYNTAX)
        value = int(text, 10)
    low, high = int_range(bits, signed)
    if not low <= value <= high:
        raise NumericParseError(text, OUT_OF_RANGE)
    return value


def parse_int(text: str, bits: int = 64, *, prefixed: bool = False) -> int:
    """Parse a signed integer that must fit in ``bits``.

    Raw form values are strictly base 10. Bound literals pass
    ``prefixed=True`` to also accept ``0x``/``0o``/``0b``/leading-zero octal
    forms with ``_`` digit separators.
    """
    return _parse_integer(text, bits, True, prefixed)


def parse_uint(text: str, bits: int = 64, *, prefixed: bool = False) -> int:
    """Parse an unsigned integer that must fit in ``bits``; signs are rejected."""
    return _parse_integer(text, bits, False, prefixed)


def parse_float(text: str, bits: int = 64) -> float:
    """Parse a decimal float literal, narrowed to single precision for 32 bits."""
    if _FLOAT_SPECIAL.fullmatch(text):
        return float(text)
    if not _FLOAT.fullmatch(text):
        raise NumericParseError(text, INVALID_SYNTAX)
    value = float(text)
    if math.isinf(value):
        raise NumericParseError(text, OUT_OF_RANGE)
    if bits == 32:
        try:
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            raise NumericParseError(text, OUT_OF_RANGE) from None
        if math.isinf(value):
            raise NumericParseError(text, OUT_OF_RANGE)
    return value
