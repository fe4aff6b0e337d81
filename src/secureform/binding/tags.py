"""Form tag parser: ``name["?" options]`` into a FieldSpec."""

from __future__ import annotations

import re
from urllib.parse import unquote_plus

from secureform.core.exceptions import TagSyntaxError
from secureform.models.field_spec import FieldSpec

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _unescape(text: str) -> str:
    match = _BAD_ESCAPE.search(text)
    if match:
        raise TagSyntaxError(f"invalid URL escape {text[match.start():match.start() + 3]!r}")
    return unquote_plus(text)


def parse_query(query: str) -> dict[str, str]:
    """Decode a URL query string, keeping the first value of each key.

    Pairs are separated by ``&`` only; a ``;`` in a pair is rejected.
    """
    values: dict[str, str] = {}
    for part in query.split("&"):
        if not part:
            continue
        if ";" in part:
            raise TagSyntaxError("invalid semicolon separator in query")
        key, _, value = part.partition("=")
        values.setdefault(_unescape(key), _unescape(value))
    return values


def parse_tag(tag: str) -> FieldSpec:
    """Split a form tag into its lookup name and min/max literals.

    Everything before the first ``?`` is the name, verbatim. Without a
    ``?`` the whole tag is the name and no bounds apply.
    """
    name, sep, options = tag.partition("?")
    if not sep:
        return FieldSpec(name=tag)
    values = parse_query(options)
    return FieldSpec(
        name=name,
        min_literal=values.get("min") or None,
        max_literal=values.get("max") or None,
    )
