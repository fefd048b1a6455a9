# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Go and generic point encodings."""

from collections.abc import Callable

import pytest

from sgfkit.model.types import BoardSize, GameType, GoPoint
from sgfkit.properties.encoding import (
    GenericEncoding,
    GoEncoding,
    InvalidValue,
    ValueErrorKind,
    encoding_for,
    point_to_letters,
)

# ###############
# Test Helpers
# ###############


def _board(columns: int, rows: int | None = None) -> GoEncoding:
    return GoEncoding(BoardSize(columns=columns, rows=rows or columns))


def _invalid(func: Callable[..., object], *args: object) -> ValueErrorKind:
    with pytest.raises(InvalidValue) as exc_info:
        func(*args)
    return exc_info.value.kind


# ###############
# Go Points
# ###############


class TestGoPoints:
    @pytest.mark.parametrize(
        ("raw", "x", "y"),
        [("aa", 0, 0), ("sa", 18, 0), ("as", 0, 18), ("dp", 3, 15)],
    )
    def test_decode(self, raw: str, x: int, y: int) -> None:
        assert _board(19).decode_point(raw) == GoPoint(x=x, y=y)

    def test_uppercase_letters_address_large_boards(self) -> None:
        assert _board(52).decode_point("AZ") == GoPoint(x=26, y=51)

    def test_out_of_bounds(self) -> None:
        assert _invalid(_board(9).decode_point, "jj") == ValueErrorKind.POINT_OUT_OF_BOUNDS

    def test_rectangular_board_bounds(self) -> None:
        board = _board(13, 9)
        assert board.decode_point("mi") == GoPoint(x=12, y=8)
        assert _invalid(board.decode_point, "aj") == ValueErrorKind.POINT_OUT_OF_BOUNDS

    @pytest.mark.parametrize("raw", ["a", "abc", "a1", "", "??"])
    def test_malformed(self, raw: str) -> None:
        assert _invalid(_board(19).decode_point, raw) == ValueErrorKind.INVALID_POINT

    def test_encode(self) -> None:
        assert _board(19).encode_point(GoPoint(x=3, y=15)) == "dp"
        assert point_to_letters(GoPoint(x=27, y=0)) == "Ba"


# ###############
# Go Moves
# ###############


class TestGoMoves:
    def test_empty_is_pass(self) -> None:
        assert _board(19).decode_move("") is None
        assert _board(25).decode_move("") is None

    def test_tt_is_pass_on_small_boards(self) -> None:
        assert _board(19).decode_move("tt") is None
        assert _board(9).decode_move("tt") is None

    def test_tt_is_a_point_on_large_boards(self) -> None:
        assert _board(21).decode_move("tt") == GoPoint(x=19, y=19)

    def test_tt_on_wide_board(self) -> None:
        assert _invalid(_board(21, 19).decode_move, "tt") == ValueErrorKind.POINT_OUT_OF_BOUNDS

    def test_pass_is_encoded_as_tt_on_small_boards(self) -> None:
        assert _board(19).encode_move(None) == "tt"

    def test_pass_is_encoded_empty_on_large_boards(self) -> None:
        assert _board(21).encode_move(None) == ""


# ###############
# Go Point Lists
# ###############


class TestGoPointLists:
    def test_plain_list(self) -> None:
        assert _board(19).decode_point_list(["aa", "bb"]) == [GoPoint(x=0, y=0), GoPoint(x=1, y=1)]

    def test_compressed_rectangle_is_expanded_row_major(self) -> None:
        assert _board(19).decode_point_list(["aa:bb"]) == [
            GoPoint(x=0, y=0),
            GoPoint(x=1, y=0),
            GoPoint(x=0, y=1),
            GoPoint(x=1, y=1),
        ]

    def test_single_point_rectangle(self) -> None:
        assert _board(19).decode_point_list(["cc:cc"]) == [GoPoint(x=2, y=2)]

    def test_inverted_rectangle(self) -> None:
        assert _invalid(_board(19).decode_point_list, ["bb:aa"]) == ValueErrorKind.INVALID_COMPOSE

    def test_duplicate_point(self) -> None:
        assert _invalid(_board(19).decode_point_list, ["aa", "aa"]) == ValueErrorKind.DUPLICATE_POINT

    def test_point_inside_listed_rectangle_is_duplicate(self) -> None:
        assert _invalid(_board(19).decode_point_list, ["aa:cc", "bb"]) == ValueErrorKind.DUPLICATE_POINT

    def test_rectangle_out_of_bounds(self) -> None:
        assert _invalid(_board(9).decode_point_list, ["aa:jj"]) == ValueErrorKind.POINT_OUT_OF_BOUNDS


# ###############
# Generic Encoding
# ###############


class TestGenericEncoding:
    def test_points_are_opaque(self) -> None:
        encoding = GenericEncoding()
        assert encoding.decode_point("whatever-string") == "whatever-string"
        assert encoding.decode_move("e2e4") == "e2e4"
        assert encoding.decode_move("") is None

    def test_lists_are_not_expanded(self) -> None:
        assert GenericEncoding().decode_point_list(["aa:bb", "aa:bb"]) == ["aa:bb", "aa:bb"]

    def test_encode_is_verbatim(self) -> None:
        assert GenericEncoding().encode_point("e2e4") == "e2e4"

    def test_go_point_is_written_as_letters(self) -> None:
        assert GenericEncoding().encode_stone(GoPoint(x=1, y=2)) == "bc"

    def test_unwritable_chunk_is_rejected(self) -> None:
        assert _invalid(GenericEncoding().decode_point, "a]b") == ValueErrorKind.INVALID_POINT


# ###############
# Encoding Selection
# ###############


class TestEncodingFor:
    def test_go_uses_board_size(self) -> None:
        encoding = encoding_for(GameType(number=1), BoardSize(columns=9, rows=9))
        assert isinstance(encoding, GoEncoding)
        assert encoding.board_size == BoardSize(columns=9, rows=9)

    def test_go_defaults_to_19x19(self) -> None:
        encoding = encoding_for(GameType(number=1))
        assert isinstance(encoding, GoEncoding)
        assert encoding.board_size == BoardSize(columns=19, rows=19)

    def test_other_games_are_generic(self) -> None:
        assert isinstance(encoding_for(GameType(number=2), None), GenericEncoding)
