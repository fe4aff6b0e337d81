"""Destination record introspection.

A destination is an instance of a ``@dataclass`` or a pydantic ``BaseModel``.
Members are listed in declaration order together with their annotation,
their ``Annotated`` metadata and their optional form tag; ``resolve_kind``
maps an annotation onto the closed set of bindable kinds.
"""

from __future__ import annotations

import dataclasses
import types
import typing
import weakref
from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, Any, Iterator, Optional, Union

from pydantic import BaseModel
from starlette.datastructures import UploadFile

from secureform.core.exceptions import InvalidDestinationError, UnsupportedFieldKindError
from secureform.core.protocols import Settable
from secureform.core.types import TAG_KEY, FloatWidth, Form, IntWidth


class Kind(StrEnum):
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    STRING = "string"
    SETTABLE = "settable"
    FILE = "file"


_ZERO: dict[Kind, Any] = {
    Kind.BOOL: False,
    Kind.INT: 0,
    Kind.UINT: 0,
    Kind.FLOAT: 0.0,
    Kind.STRING: "",
    Kind.SETTABLE: None,
    Kind.FILE: None,
}


@dataclass(frozen=True)
class FieldKind:
    """Resolved kind of one member: scalar kind plus list/nullable wrappers."""

    kind: Kind
    bits: int = 64
    is_list: bool = False
    nullable: bool = False
    settable_type: Optional[type] = None

    @property
    def is_file(self) -> bool:
        return self.kind is Kind.FILE

    def zero(self) -> Any:
        if self.is_list:
            return []
        if self.nullable:
            return None
        return _ZERO[self.kind]


@dataclass(frozen=True)
class Member:
    identifier: str
    annotation: Any
    metadata: tuple[Any, ...] = ()
    tag: Optional[str] = None
    settable: bool = True


# ---------------------------------------------------------------------------
# Destination
# ---------------------------------------------------------------------------

def _is_frozen(record: object) -> bool:
    if isinstance(record, BaseModel):
        return bool(type(record).model_config.get("frozen", False))
    return type(record).__dataclass_params__.frozen  # type: ignore[attr-defined]


def resolve_destination(destination: object) -> object:
    """Follow ``weakref.ref`` indirections down to a mutable record instance."""
    value = destination
    while isinstance(value, weakref.ref):
        value = value()
    if isinstance(value, type):
        raise InvalidDestinationError()
    if not (isinstance(value, BaseModel) or dataclasses.is_dataclass(value)):
        raise InvalidDestinationError()
    if _is_frozen(value):
        raise InvalidDestinationError()
    return value


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------

def _split_annotated(annotation: Any) -> tuple[Any, tuple[Any, ...]]:
    if typing.get_origin(annotation) is Annotated:
        base, *metadata = typing.get_args(annotation)
        inner, inner_meta = _split_annotated(base)
        return inner, (*inner_meta, *metadata)
    return annotation, ()


def _tag_from(metadata: tuple[Any, ...]) -> Optional[str]:
    for item in metadata:
        if isinstance(item, Form):
            return item.tag
    return None


def _dataclass_members(record: object) -> Iterator[Member]:
    try:
        hints = typing.get_type_hints(type(record), include_extras=True)
    except (NameError, TypeError) as exc:
        raise InvalidDestinationError(f"Unresolvable annotations on {type(record).__name__}: {exc}") from exc
    for field in dataclasses.fields(record):  # type: ignore[arg-type]
        annotation, metadata = _split_annotated(hints.get(field.name, field.type))
        tag = _tag_from(metadata)
        if tag is None:
            tag = field.metadata.get(TAG_KEY)
        yield Member(
            identifier=field.name,
            annotation=annotation,
            metadata=metadata,
            tag=tag,
            settable=not field.name.startswith("_"),
        )


def _model_members(record: BaseModel) -> Iterator[Member]:
    for name, info in type(record).model_fields.items():
        annotation, metadata = _split_annotated(info.annotation)
        metadata = (*metadata, *info.metadata)
        yield Member(
            identifier=name,
            annotation=annotation,
            metadata=metadata,
            tag=_tag_from(metadata),
            settable=not name.startswith("_") and not info.frozen,
        )


def iter_members(record: object) -> Iterator[Member]:
    """Yield the record's members in declaration order."""
    if isinstance(record, BaseModel):
        return _model_members(record)
    return _dataclass_members(record)


# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------

def _strip_optional(annotation: Any) -> tuple[Any, bool]:
    if typing.get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1 and len(args) < len(typing.get_args(annotation)):
            return args[0], True
    return annotation, False


def _scalar_kind(annotation: Any, metadata: tuple[Any, ...], original: Any) -> FieldKind:
    annotation, extra = _split_annotated(annotation)
    metadata = (*extra, *metadata)
    if typing.get_origin(annotation) is not None or not isinstance(annotation, type):
        raise UnsupportedFieldKindError(original)
    if issubclass(annotation, UploadFile):
        return FieldKind(Kind.FILE)
    if annotation not in (bool, int, float, str) and issubclass(annotation, Settable):
        return FieldKind(Kind.SETTABLE, settable_type=annotation)
    if annotation is bool:
        return FieldKind(Kind.BOOL)
    if annotation is int:
        width = next((m for m in metadata if isinstance(m, IntWidth)), IntWidth())
        return FieldKind(Kind.INT if width.signed else Kind.UINT, bits=width.bits)
    if annotation is float:
        width = next((m for m in metadata if isinstance(m, FloatWidth)), FloatWidth())
        return FieldKind(Kind.FLOAT, bits=width.bits)
    if annotation is str:
        return FieldKind(Kind.STRING)
    raise UnsupportedFieldKindError(original)


def resolve_kind(member: Member) -> FieldKind:
    """Map a member annotation onto a FieldKind or raise UnsupportedFieldKindError."""
    annotation, nullable = _strip_optional(member.annotation)
    annotation, metadata = _split_annotated(annotation)
    metadata = (*member.metadata, *metadata)
    if typing.get_origin(annotation) is list:
        args = typing.get_args(annotation)
        if len(args) != 1:
            raise UnsupportedFieldKindError(member.annotation)
        element = _scalar_kind(args[0], metadata, member.annotation)
        return dataclasses.replace(element, is_list=True, nullable=nullable)
    kind = _scalar_kind(annotation, metadata, member.annotation)
    return dataclasses.replace(kind, nullable=nullable)
