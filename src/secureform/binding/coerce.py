"""Raw form value coercion for each bindable kind."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from starlette.datastructures import UploadFile

from secureform.binding.bounds import validate_float, validate_int, validate_string, validate_uint
from secureform.binding.fields import FieldKind, Kind
from secureform.binding.literals import parse_float, parse_int, parse_uint
from secureform.core.config import BindConfig
from secureform.core.exceptions import MissingFileError, UnsupportedFieldKindError
from secureform.core.types import FileSource, SourceValues
from secureform.models.field_spec import FieldSpec


def values_for(mapping: Mapping[str, Any], name: str) -> Sequence[Any]:
    """Ordered values for ``name``; a lone value counts as a one-item list."""
    values = mapping.get(name, ())
    if isinstance(values, (str, UploadFile)):
        return (values,)
    return values


def value_by_index(source: SourceValues, name: str, index: int) -> str:
    values = values_for(source, name)
    if index < len(values):
        return values[index]
    return ""


def file_by_index(files: Optional[FileSource], name: str, index: int) -> Optional[UploadFile]:
    if files is None:
        return None
    handles = values_for(files, name)
    if index < len(handles):
        return handles[index]
    return None


def coerce(
    kind: FieldKind,
    spec: FieldSpec,
    index: int,
    source: SourceValues,
    files: Optional[FileSource],
    config: BindConfig,
) -> Any:
    """Convert the ``index``-th value for ``spec.name`` into ``kind``.

    Numeric and string values are bound-checked against the tag's min/max;
    Settable types parse the raw value themselves and skip bound checks.
    """
    if kind.kind is Kind.BOOL:
        return True

    if kind.kind is Kind.FILE:
        handle = file_by_index(files, spec.name, index)
        if handle is None:
            raise MissingFileError()
        return handle

    raw = value_by_index(source, spec.name, index)

    if kind.kind is Kind.INT:
        number = parse_int(raw, kind.bits)
        validate_int(number, spec)
        return number

    if kind.kind is Kind.UINT:
        number = parse_uint(raw, kind.bits)
        validate_uint(number, spec)
        return number

    if kind.kind is Kind.FLOAT:
        real = parse_float(raw, kind.bits)
        validate_float(real, spec)
        return real

    if kind.kind is Kind.STRING:
        validate_string(raw, spec, config.max_string_length)
        return raw

    if kind.kind is Kind.SETTABLE and kind.settable_type is not None:
        value = kind.settable_type()
        value.set(raw)
        return value

    raise UnsupportedFieldKindError(kind)
