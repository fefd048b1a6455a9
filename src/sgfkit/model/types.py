# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scalar types of the SGF data model: game type, board size, colours, points."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

GO_GAME_NUMBER = 1

# Largest board a Go letter-pair coordinate can address (a-z, A-Z).
MAX_BOARD_SIZE = 52

# Game numbers registered by the FF[4] standard for the GM property.
GAME_NAMES: dict[int, str] = {
    1: "Go",
    2: "Othello",
    3: "Chess",
    4: "Gomoku+Renju",
    5: "Nine Men's Morris",
    6: "Backgammon",
    7: "Chinese chess",
    8: "Shogi",
    9: "Lines of Action",
    10: "Ataxx",
    11: "Hex",
    12: "Jungle",
    13: "Neutron",
    14: "Philosopher's Football",
    15: "Quadrature",
    16: "Trax",
    17: "Tantrix",
    18: "Amazons",
    19: "Octi",
    20: "Gess",
    21: "Twixt",
    22: "Zertz",
    23: "Plateau",
    24: "Yinsh",
    25: "Punct",
    26: "Gobblet",
    27: "Hive",
    28: "Exxit",
    29: "Hnefatafl",
    30: "Kuba",
    31: "Tripples",
    32: "Chase",
    33: "Tumbling Down",
    34: "Sahara",
    35: "Byte",
    36: "Focus",
    37: "Dvonn",
    38: "Tamsk",
    39: "Gipf",
    40: "Kropki",
}


class Color(Enum):
    """An SGF Color value."""

    BLACK = "B"
    WHITE = "W"


class Double(Enum):
    """An SGF Double value: normal or emphasized."""

    NORMAL = "1"
    EMPHASIZED = "2"


class GameType(BaseModel):
    """The game recorded in a game tree, taken from the root's GM property."""

    model_config = ConfigDict(frozen=True)

    number: int = _Field(default=GO_GAME_NUMBER, ge=1)

    @property
    def is_go(self) -> bool:
        """Return True if Point, Move and Stone use the Go coordinate encoding."""
        return self.number == GO_GAME_NUMBER

    @property
    def name(self) -> str:
        """Return the registered name of the game, or 'Unknown'."""
        return GAME_NAMES.get(self.number, "Unknown")


class BoardSize(BaseModel):
    """Board dimensions from the SZ property (columns x rows)."""

    model_config = ConfigDict(frozen=True)

    columns: int = _Field(ge=1, le=MAX_BOARD_SIZE)
    rows: int = _Field(ge=1, le=MAX_BOARD_SIZE)

    @property
    def is_square(self) -> bool:
        return self.columns == self.rows


class GoPoint(BaseModel):
    """A Go board coordinate: x is the column and y the row, both 0-based from the top left."""

    model_config = ConfigDict(frozen=True)

    x: int = _Field(ge=0, lt=MAX_BOARD_SIZE)
    y: int = _Field(ge=0, lt=MAX_BOARD_SIZE)


DEFAULT_BOARD_SIZE = BoardSize(columns=19, rows=19)
