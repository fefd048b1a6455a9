# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Point, Move and Stone encodings.

Go writes board coordinates as two letters, ``a``-``z`` for 0-25 and
``A``-``Z`` for 26-51, column first. Every other game uses its own
notation, which is carried through as an opaque string. Both encodings
expose the same methods; :func:`encoding_for` picks one per game tree.
"""

from __future__ import annotations

import enum

from sgfkit.model.types import DEFAULT_BOARD_SIZE, BoardSize, GameType, GoPoint
from sgfkit.properties.text import is_valid_chunk, split_compose

# ###############
# Public Interface
# ###############


class ValueErrorKind(enum.Enum):
    """Ways a property value can fail to match its declared type."""

    TOO_MANY_VALUES = "too many values"
    MISSING_VALUE = "missing value"
    INVALID_NUMBER = "invalid number"
    NUMBER_OUT_OF_RANGE = "number out of range"
    INVALID_DOUBLE = "invalid double"
    INVALID_COLOR = "invalid color"
    UNEXPECTED_VALUE = "unexpected value"
    INVALID_POINT = "invalid point"
    POINT_OUT_OF_BOUNDS = "point out of bounds"
    DUPLICATE_POINT = "duplicate point"
    INVALID_COMPOSE = "invalid compose"
    ROOT_PROPERTY_MISPLACED = "root property misplaced"


class InvalidValue(Exception):
    """Raised by the value decoders; positioned and reported by the value analyzer."""

    def __init__(self, kind: ValueErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


# Largest board on which "tt" still means a pass rather than a point.
PASS_BOARD_LIMIT = 19


def point_to_letters(point: GoPoint) -> str:
    """Return the two-letter Go form of *point*."""
    return _LETTERS[point.x] + _LETTERS[point.y]


class GoEncoding:
    """Go coordinates on a board of the given size."""

    def __init__(self, board_size: BoardSize = DEFAULT_BOARD_SIZE) -> None:
        self.board_size = board_size

    @property
    def allows_tt_pass(self) -> bool:
        return self.board_size.columns <= PASS_BOARD_LIMIT and self.board_size.rows <= PASS_BOARD_LIMIT

    def decode_point(self, raw: str) -> GoPoint:
        if len(raw) != 2 or raw[0] not in _COORDINATES or raw[1] not in _COORDINATES:
            raise InvalidValue(ValueErrorKind.INVALID_POINT, f"'{raw}' is not a Go point")
        x = _COORDINATES[raw[0]]
        y = _COORDINATES[raw[1]]
        if x >= self.board_size.columns or y >= self.board_size.rows:
            raise InvalidValue(
                ValueErrorKind.POINT_OUT_OF_BOUNDS,
                f"Point '{raw}' lies outside the {self.board_size.columns}x{self.board_size.rows} board",
            )
        return GoPoint(x=x, y=y)

    def decode_move(self, raw: str) -> GoPoint | None:
        """Return the move's point, or None for a pass."""
        if raw == "" or (raw == "tt" and self.allows_tt_pass):
            return None
        return self.decode_point(raw)

    def decode_stone(self, raw: str) -> GoPoint:
        return self.decode_point(raw)

    def decode_point_list(self, chunks: list[str]) -> list[GoPoint]:
        """Decode a list of points, expanding compressed ``ul:lr`` rectangles.

        Raises:
            InvalidValue: On a malformed or out-of-bounds point, an inverted
                rectangle, or a point that appears more than once.
        """
        points: list[GoPoint] = []
        seen: set[GoPoint] = set()
        for chunk in chunks:
            for point in self._expand(chunk):
                if point in seen:
                    raise InvalidValue(
                        ValueErrorKind.DUPLICATE_POINT,
                        f"Point '{point_to_letters(point)}' is listed more than once",
                    )
                seen.add(point)
                points.append(point)
        return points

    def encode_point(self, point: GoPoint | str) -> str:
        if isinstance(point, GoPoint):
            return point_to_letters(point)
        return point

    def encode_move(self, point: GoPoint | str | None) -> str:
        if point is None:
            return "tt" if self.allows_tt_pass else ""
        return self.encode_point(point)

    def encode_stone(self, point: GoPoint | str) -> str:
        return self.encode_point(point)

    def _expand(self, chunk: str) -> list[GoPoint]:
        halves = split_compose(chunk)
        if halves is None:
            return [self.decode_point(chunk)]
        upper_left = self.decode_point(halves[0])
        lower_right = self.decode_point(halves[1])
        if lower_right.x < upper_left.x or lower_right.y < upper_left.y:
            raise InvalidValue(
                ValueErrorKind.INVALID_COMPOSE,
                f"'{chunk}' is not a rectangle from its upper left to its lower right corner",
            )
        return [
            GoPoint(x=x, y=y)
            for y in range(upper_left.y, lower_right.y + 1)
            for x in range(upper_left.x, lower_right.x + 1)
        ]


class GenericEncoding:
    """Opaque coordinates for every game other than Go."""

    def decode_point(self, raw: str) -> str:
        if not is_valid_chunk(raw):
            raise InvalidValue(ValueErrorKind.INVALID_POINT, f"'{raw}' cannot be written as a value")
        return raw

    def decode_move(self, raw: str) -> str | None:
        """Keep a move verbatim; an empty move is a pass, as in every game."""
        if raw == "":
            return None
        return self.decode_point(raw)

    def decode_stone(self, raw: str) -> str:
        return self.decode_point(raw)

    def decode_point_list(self, chunks: list[str]) -> list[str]:
        return [self.decode_point(chunk) for chunk in chunks]

    def encode_point(self, point: GoPoint | str) -> str:
        if isinstance(point, GoPoint):
            return point_to_letters(point)
        return point

    def encode_move(self, point: GoPoint | str | None) -> str:
        if point is None:
            return ""
        return self.encode_point(point)

    def encode_stone(self, point: GoPoint | str) -> str:
        return self.encode_point(point)


Encoding = GoEncoding | GenericEncoding


def encoding_for(game_type: GameType, board_size: BoardSize | None = None) -> Encoding:
    """Return the encoding used by a game tree of the given type and size."""
    if game_type.is_go:
        return GoEncoding(board_size or DEFAULT_BOARD_SIZE)
    return GenericEncoding()


# ################
# Implementation
# ################

_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_COORDINATES: dict[str, int] = {letter: index for index, letter in enumerate(_LETTERS)}
