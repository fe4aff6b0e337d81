"""Type aliases and annotation markers used across SecureForm."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Annotated

from starlette.datastructures import UploadFile

SourceValues = Mapping[str, Sequence[str]]
FileSource = Mapping[str, Sequence[UploadFile]]

TAG_KEY = "form"


@dataclass(frozen=True)
class Form:
    """Form tag for a member: ``name["?" options]``."""

    tag: str


@dataclass(frozen=True)
class IntWidth:
    bits: int = 64
    signed: bool = True


@dataclass(frozen=True)
class FloatWidth:
    bits: int = 64


Int8 = Annotated[int, IntWidth(8)]
Int16 = Annotated[int, IntWidth(16)]
Int32 = Annotated[int, IntWidth(32)]
Int64 = Annotated[int, IntWidth(64)]

Uint = Annotated[int, IntWidth(64, signed=False)]
Uint8 = Annotated[int, IntWidth(8, signed=False)]
Uint16 = Annotated[int, IntWidth(16, signed=False)]
Uint32 = Annotated[int, IntWidth(32, signed=False)]
Uint64 = Annotated[int, IntWidth(64, signed=False)]

Float32 = Annotated[float, FloatWidth(32)]
Float64 = Annotated[float, FloatWidth(64)]
