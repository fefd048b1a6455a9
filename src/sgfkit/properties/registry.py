# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Property type registry.

Maps a property identifier, under a given game type, to the value type and
cardinality the FF[4] standard declares for it. The general table covers
every FF[4] property; the Go table adds the properties that only exist for
GM[1]. Identifiers found in neither table resolve to the unknown type so
that private properties are preserved rather than rejected.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType

from sgfkit.model.types import GAME_NAMES, GO_GAME_NUMBER, MAX_BOARD_SIZE, GameType

# ###############
# Public Interface
# ###############


class ValueKind(enum.Enum):
    """SGF value types."""

    NUMBER = "Number"
    REAL = "Real"
    DOUBLE = "Double"
    COLOR = "Color"
    SIMPLE_TEXT = "SimpleText"
    TEXT = "Text"
    POINT = "Point"
    MOVE = "Move"
    STONE = "Stone"
    NONE = "None"
    COMPOSE = "Compose"
    UNKNOWN = "Unknown"


class Cardinality(enum.Enum):
    """How many values a property takes."""

    SINGLE = "single"
    LIST = "list"
    ELIST = "elist"


class PropertyCategory(enum.Enum):
    """FF[4] property categories, which govern where a property may appear."""

    MOVE = "move"
    SETUP = "setup"
    ROOT = "root"
    GAME_INFO = "game-info"
    INHERIT = "inherit"
    NONE = "-"


@dataclass(frozen=True)
class PropertyTypeSpec:
    """The declared type of one property.

    Attributes:
        kind: The value type. COMPOSE values take their halves from *composed*.
        cardinality: Whether the property takes one value, a non-empty list,
            or a possibly empty list.
        category: The FF[4] property category.
        composed: The value types of the two halves of a Compose value.
        compose_optional: A value without a colon is also accepted and is
            parsed as the first half alone (``SZ[19]``).
        allows_none: An empty value is accepted as the 'none' value (``FG[]``).
        number_range: Inclusive (low, high) bounds for Number values (or for
            both Number halves of a compose); None means unbounded.
        game_type: The GM number this property is restricted to, if any.
    """

    kind: ValueKind
    cardinality: Cardinality = Cardinality.SINGLE
    category: PropertyCategory = PropertyCategory.NONE
    composed: tuple[ValueKind, ValueKind] | None = None
    compose_optional: bool = False
    allows_none: bool = False
    number_range: tuple[int | None, int | None] | None = None
    game_type: int | None = None

    @property
    def root_only(self) -> bool:
        return self.category == PropertyCategory.ROOT

    @property
    def is_list(self) -> bool:
        return self.cardinality != Cardinality.SINGLE


UNKNOWN_PROPERTY = PropertyTypeSpec(ValueKind.UNKNOWN, Cardinality.ELIST)


def lookup(identifier: str, game_type: GameType) -> PropertyTypeSpec:
    """Return the declared type of *identifier* under *game_type*.

    Game-specific tables take precedence over the general table. Identifiers
    registered for another game, or not registered at all, resolve to
    :data:`UNKNOWN_PROPERTY`.
    """
    game_table = _GAME_TABLES.get(game_type.number)
    if game_table is not None and identifier in game_table:
        return game_table[identifier]
    return GENERAL_PROPERTIES.get(identifier, UNKNOWN_PROPERTY)


def is_registered(identifier: str, game_type: GameType) -> bool:
    """Return True if *identifier* has a declared type under *game_type*."""
    return lookup(identifier, game_type) is not UNKNOWN_PROPERTY


def identifiers_in_category(category: PropertyCategory, game_type: GameType) -> frozenset[str]:
    """Return every identifier of the given category under *game_type*."""
    table = dict(GENERAL_PROPERTIES)
    table.update(_GAME_TABLES.get(game_type.number, {}))
    return frozenset(ident for ident, spec in table.items() if spec.category == category)


# ################
# Implementation
# ################

_K = ValueKind
_C = PropertyCategory
_SINGLE = Cardinality.SINGLE
_LIST = Cardinality.LIST
_ELIST = Cardinality.ELIST


def _compose(
    first: ValueKind,
    second: ValueKind,
    cardinality: Cardinality = _SINGLE,
    category: PropertyCategory = _C.NONE,
    **options: object,
) -> PropertyTypeSpec:
    return PropertyTypeSpec(_K.COMPOSE, cardinality, category, composed=(first, second), **options)  # type: ignore[arg-type]


P = PropertyTypeSpec

_GENERAL: dict[str, PropertyTypeSpec] = {
    # Move properties
    "B": P(_K.MOVE, category=_C.MOVE),  # Black
    "KO": P(_K.NONE, category=_C.MOVE),  # Ko
    "MN": P(_K.NUMBER, category=_C.MOVE),  # set Move Number
    "W": P(_K.MOVE, category=_C.MOVE),  # White
    # Setup properties
    "AB": P(_K.STONE, _LIST, _C.SETUP),  # Add Black
    "AE": P(_K.POINT, _LIST, _C.SETUP),  # Add Empty
    "AW": P(_K.STONE, _LIST, _C.SETUP),  # Add White
    "PL": P(_K.COLOR, category=_C.SETUP),  # Player to play
    # Node annotation properties
    "C": P(_K.TEXT),  # Comment
    "DM": P(_K.DOUBLE),  # even position
    "GB": P(_K.DOUBLE),  # Good for Black
    "GW": P(_K.DOUBLE),  # Good for White
    "HO": P(_K.DOUBLE),  # Hotspot
    "N": P(_K.SIMPLE_TEXT),  # Nodename
    "UC": P(_K.DOUBLE),  # Unclear position
    "V": P(_K.REAL),  # Value
    # Move annotation properties
    "BM": P(_K.DOUBLE, category=_C.MOVE),  # Bad move
    "DO": P(_K.NONE, category=_C.MOVE),  # Doubtful
    "IT": P(_K.NONE, category=_C.MOVE),  # Interesting
    "TE": P(_K.DOUBLE, category=_C.MOVE),  # Tesuji
    # Markup properties
    "AR": _compose(_K.POINT, _K.POINT, _LIST),  # Arrow
    "CR": P(_K.POINT, _LIST),  # Circle
    "DD": P(_K.POINT, _ELIST, _C.INHERIT),  # Dim points
    "LB": _compose(_K.POINT, _K.SIMPLE_TEXT, _LIST),  # Label
    "LN": _compose(_K.POINT, _K.POINT, _LIST),  # Line
    "MA": P(_K.POINT, _LIST),  # Mark with X
    "SL": P(_K.POINT, _LIST),  # Selected points
    "SQ": P(_K.POINT, _LIST),  # Square
    "TR": P(_K.POINT, _LIST),  # Triangle
    # Root properties
    "AP": _compose(_K.SIMPLE_TEXT, _K.SIMPLE_TEXT, category=_C.ROOT),  # Application
    "CA": P(_K.SIMPLE_TEXT, category=_C.ROOT),  # Charset
    "FF": P(_K.NUMBER, category=_C.ROOT, number_range=(1, 4)),  # Fileformat
    "GM": P(_K.NUMBER, category=_C.ROOT, number_range=(1, None)),  # Game
    "ST": P(_K.NUMBER, category=_C.ROOT, number_range=(0, 3)),  # Style
    "SZ": _compose(  # Size
        _K.NUMBER,
        _K.NUMBER,
        category=_C.ROOT,
        compose_optional=True,
        number_range=(1, MAX_BOARD_SIZE),
    ),
    # Game info properties
    "AN": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Annotation
    "BR": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Black rank
    "BT": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Black team
    "CP": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Copyright
    "DT": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Date
    "EV": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Event
    "GC": P(_K.TEXT, category=_C.GAME_INFO),  # Game comment
    "GN": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Game name
    "ON": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Opening
    "OT": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Overtime
    "PB": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Player Black
    "PC": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Place
    "PW": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Player White
    "RE": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Result
    "RO": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Round
    "RU": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Rules
    "SO": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # Source
    "TM": P(_K.REAL, category=_C.GAME_INFO),  # Timelimit
    "US": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # User
    "WR": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # White rank
    "WT": P(_K.SIMPLE_TEXT, category=_C.GAME_INFO),  # White team
    # Timing properties
    "BL": P(_K.REAL, category=_C.MOVE),  # Black time left
    "OB": P(_K.NUMBER, category=_C.MOVE),  # OtStones Black
    "OW": P(_K.NUMBER, category=_C.MOVE),  # OtStones White
    "WL": P(_K.REAL, category=_C.MOVE),  # White time left
    # Miscellaneous properties
    "FG": _compose(_K.NUMBER, _K.SIMPLE_TEXT, allows_none=True),  # Figure
    "PM": P(_K.NUMBER, category=_C.INHERIT, number_range=(1, 2)),  # Print move mode
    "VW": P(_K.POINT, _ELIST, _C.INHERIT),  # View
}

_GO: dict[str, PropertyTypeSpec] = {
    "HA": P(_K.NUMBER, category=_C.GAME_INFO, number_range=(0, None), game_type=GO_GAME_NUMBER),  # Handicap
    "KM": P(_K.REAL, category=_C.GAME_INFO, game_type=GO_GAME_NUMBER),  # Komi
    "TB": P(_K.POINT, _ELIST, game_type=GO_GAME_NUMBER),  # Territory Black
    "TW": P(_K.POINT, _ELIST, game_type=GO_GAME_NUMBER),  # Territory White
}

del P

GENERAL_PROPERTIES: MappingProxyType[str, PropertyTypeSpec] = MappingProxyType(_GENERAL)
GO_PROPERTIES: MappingProxyType[str, PropertyTypeSpec] = MappingProxyType(_GO)

_GAME_TABLES: dict[int, MappingProxyType[str, PropertyTypeSpec]] = {
    GO_GAME_NUMBER: GO_PROPERTIES,
}

__all__ = [
    "GAME_NAMES",
    "GENERAL_PROPERTIES",
    "GO_PROPERTIES",
    "UNKNOWN_PROPERTY",
    "Cardinality",
    "PropertyCategory",
    "PropertyTypeSpec",
    "ValueKind",
    "identifiers_in_category",
    "is_registered",
    "lookup",
]
