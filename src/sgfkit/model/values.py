# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed SGF property values."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

from sgfkit.model.types import Color, Double, GoPoint
from sgfkit.properties.text import is_valid_chunk, text_value

# ###############
# Public Interface
# ###############


class NumberValue(BaseModel):
    """An SGF Number."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: int


class RealValue(BaseModel):
    """An SGF Real, kept as a Decimal so it is written back exactly as read."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["real"] = "real"
    value: Decimal


class DoubleValue(BaseModel):
    """An SGF Double (normal or emphasized)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["double"] = "double"
    value: Double


class ColorValue(BaseModel):
    """An SGF Color."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["color"] = "color"
    value: Color


class SimpleTextValue(BaseModel):
    """An SGF SimpleText, decoded to a single line."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["simpletext"] = "simpletext"
    text: str


class TextValue(BaseModel):
    """An SGF Text, decoded; hard line breaks are kept as LF."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class PointValue(BaseModel):
    """An SGF Point: a GoPoint for Go, the verbatim string for other games."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["point"] = "point"
    point: GoPoint | str


class MoveValue(BaseModel):
    """An SGF Move: a GoPoint for Go, the verbatim string otherwise, or None for a pass."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["move"] = "move"
    point: GoPoint | str | None = None

    @property
    def is_pass(self) -> bool:
        return self.point is None


class StoneValue(BaseModel):
    """An SGF Stone: a GoPoint for Go, the verbatim string for other games."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["stone"] = "stone"
    point: GoPoint | str


class NoneValue(BaseModel):
    """The SGF 'none' value, written as an empty pair of brackets."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"


class ComposeValue(BaseModel):
    """Two values written as one, separated by an unescaped colon."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["compose"] = "compose"
    first: PropertyValue
    second: PropertyValue


class UnknownValue(BaseModel):
    """The value of an unregistered (private) property.

    The raw chunk is kept exactly as it appeared between the brackets,
    escapes included, and is written back unchanged.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["unknown"] = "unknown"
    raw: str

    @field_validator("raw")
    @classmethod
    def _check_raw(cls, raw: str) -> str:
        if not is_valid_chunk(raw):
            raise ValueError("raw value contains an unescaped ']' or a dangling backslash")
        return raw

    @property
    def text(self) -> str:
        """The raw chunk decoded with Text rules."""
        return text_value(self.raw)


# A property value. The `kind` discriminator keeps (de)serialization unambiguous.
PropertyValue = Annotated[
    NumberValue
    | RealValue
    | DoubleValue
    | ColorValue
    | SimpleTextValue
    | TextValue
    | PointValue
    | MoveValue
    | StoneValue
    | NoneValue
    | ComposeValue
    | UnknownValue,
    _Field(discriminator="kind"),
]

# Resolve the forward reference in the self-referential compose model.
ComposeValue.model_rebuild()
