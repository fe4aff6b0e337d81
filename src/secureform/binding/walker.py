"""Populate a record from multi-valued form data.

Members are bound in declaration order and the first failure aborts the
walk. Binding is not transactional: members before the failing one keep
their newly bound values, the failing member and those after it are left
untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from secureform.binding.coerce import coerce, values_for
from secureform.binding.fields import FieldKind, Member, iter_members, resolve_destination, resolve_kind
from secureform.binding.tags import parse_tag
from secureform.core.config import BindConfig
from secureform.core.exceptions import FieldError, MissingFileError, TagSyntaxError
from secureform.core.types import FileSource, SourceValues
from secureform.models.field_spec import FieldSpec

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = BindConfig()


def resolve_spec(member: Member) -> FieldSpec:
    if member.tag is None:
        return FieldSpec(name=member.identifier)
    return parse_tag(member.tag)


def _value_count(kind: FieldKind, spec: FieldSpec, source: SourceValues, files: Optional[FileSource]) -> int:
    if kind.is_file:
        if files is None:
            raise MissingFileError()
        return len(values_for(files, spec.name))
    return len(values_for(source, spec.name))


def bind_member(
    member: Member,
    spec: FieldSpec,
    source: SourceValues,
    files: Optional[FileSource],
    config: BindConfig,
) -> Any:
    """Compute the bound value for one member without assigning it."""
    kind = resolve_kind(member)
    size = _value_count(kind, spec, source, files)

    if kind.is_list:
        return [coerce(kind, spec, index, source, files, config) for index in range(size)]

    if size == 0:
        return kind.zero()

    return coerce(kind, spec, 0, source, files, config)


def bind(
    destination: object,
    source: SourceValues,
    files: Optional[FileSource] = None,
    config: BindConfig = DEFAULT_CONFIG,
) -> None:
    """Bind ``source`` (and ``files``) into ``destination`` in place.

    Raises:
        InvalidDestinationError: destination is not a mutable record instance.
        FieldError: the first member that failed, wrapping the underlying error.
    """
    record = resolve_destination(destination)

    for member in iter_members(record):
        if not member.settable:
            logger.debug("Skipping non-settable member %s", member.identifier)
            continue

        try:
            spec = resolve_spec(member)
        except TagSyntaxError as exc:
            raise FieldError(member.identifier, exc) from exc

        try:
            value = bind_member(member, spec, source, files, config)
            setattr(record, member.identifier, value)
        except Exception as exc:
            # Settable.set and validated assignment may raise anything; report it against the field.
            raise FieldError(spec.name, exc) from exc

        logger.debug("Bound form field %s into %s", spec.name, member.identifier)
