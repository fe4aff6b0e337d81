"""Declarative binding of multi-valued form data into typed records."""

from __future__ import annotations

from secureform.binding.walker import bind
from secureform.core.config import BindConfig, ParserSettings
from secureform.core.exceptions import (
    BodyTooLargeError,
    BoundAboveMaximumError,
    BoundBelowMinimumError,
    BoundError,
    CapabilityError,
    FieldError,
    InvalidDestinationError,
    MissingFileError,
    NumericParseError,
    SecureFormError,
    TagSyntaxError,
    UnsupportedFieldKindError,
)
from secureform.core.protocols import Settable
from secureform.core.types import (
    FileSource,
    Float32,
    Float64,
    FloatWidth,
    Form,
    Int8,
    Int16,
    Int32,
    Int64,
    IntWidth,
    SourceValues,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
)
from secureform.models.field_spec import FieldSpec

__all__ = [
    "BindConfig",
    "BodyTooLargeError",
    "BoundAboveMaximumError",
    "BoundBelowMinimumError",
    "BoundError",
    "CapabilityError",
    "FieldError",
    "FieldSpec",
    "FileSource",
    "Float32",
    "Float64",
    "FloatWidth",
    "Form",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "IntWidth",
    "InvalidDestinationError",
    "MissingFileError",
    "NumericParseError",
    "ParserSettings",
    "SecureFormError",
    "Settable",
    "SourceValues",
    "TagSyntaxError",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "UnsupportedFieldKindError",
    "bind",
]
