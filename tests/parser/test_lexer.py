# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the SGF lexical scanner."""

import pytest

from sgfkit.errors import ParseError
from sgfkit.parser.lexer import LexError, LexErrorKind, Token, TokenType, tokenize

# ###############
# Test Helpers
# ###############


def _tokens_no_eof(source: str, **kwargs: bool) -> list[Token]:
    """Return all tokens except the terminal EOF token."""
    result = tokenize(source, **kwargs)
    assert result[-1].type == TokenType.EOF
    return result[:-1]


def _types(source: str) -> list[TokenType]:
    return [tok.type for tok in _tokens_no_eof(source)]


def _values(source: str, **kwargs: bool) -> list[str]:
    return [tok.value for tok in _tokens_no_eof(source, **kwargs)]


# ###############
# EOF Handling
# ###############


class TestEof:
    def test_empty_string_produces_eof(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF
        assert tokens[0].value == ""

    def test_whitespace_only_produces_eof(self) -> None:
        tokens = tokenize("  \t\r\n  ")
        assert [tok.type for tok in tokens] == [TokenType.EOF]

    def test_byte_order_mark_is_skipped(self) -> None:
        assert _types("\ufeff(;)") == [TokenType.TREE_OPEN, TokenType.NODE_START, TokenType.TREE_CLOSE]


# ###############
# Structural Tokens
# ###############


class TestStructure:
    def test_structural_characters(self) -> None:
        assert _types("(;)") == [TokenType.TREE_OPEN, TokenType.NODE_START, TokenType.TREE_CLOSE]

    def test_full_property(self) -> None:
        assert _types("(;FF[4])") == [
            TokenType.TREE_OPEN,
            TokenType.NODE_START,
            TokenType.IDENTIFIER,
            TokenType.VALUE_CHUNK,
            TokenType.TREE_CLOSE,
        ]

    def test_whitespace_between_tokens_is_ignored(self) -> None:
        assert _values("( ; B [aa]\n\t[bb] )") == ["(", ";", "B", "aa", "bb", ")"]

    def test_multiple_values(self) -> None:
        assert _values("AB[aa][bb][cc]") == ["AB", "aa", "bb", "cc"]


# ###############
# Identifiers
# ###############


class TestIdentifiers:
    def test_multi_letter_identifier(self) -> None:
        assert _values("GN[x]") == ["GN", "x"]

    def test_lowercase_is_rejected_by_default(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("(;CoPyright[x])")
        assert exc_info.value.kind == LexErrorKind.UNEXPECTED_CHARACTER
        assert exc_info.value.column == 4

    def test_old_style_identifier_drops_lowercase(self) -> None:
        assert _values("(;CoPyright[x])", old_style_identifiers=True) == ["(", ";", "CP", "x", ")"]

    def test_old_style_all_lowercase_is_rejected(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("(;copyright[x])", old_style_identifiers=True)
        assert exc_info.value.kind == LexErrorKind.UNEXPECTED_CHARACTER

    def test_digits_are_not_identifiers(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("(;B1[aa])")
        assert exc_info.value.kind == LexErrorKind.UNEXPECTED_CHARACTER


# ###############
# Value Chunks
# ###############


class TestValueChunks:
    def test_empty_value(self) -> None:
        assert _values("KO[]") == ["KO", ""]

    def test_escapes_are_kept_raw(self) -> None:
        assert _values(r"C[a\]b\\c]") == ["C", r"a\]b\\c"]

    def test_escaped_colon_is_kept_raw(self) -> None:
        assert _values(r"LB[dd:a\:b]") == ["LB", r"dd:a\:b"]

    def test_value_may_span_lines(self) -> None:
        assert _values("C[line one\nline two]") == ["C", "line one\nline two"]

    def test_structural_characters_inside_value(self) -> None:
        assert _values("C[(;)]") == ["C", "(;)"]

    def test_unterminated_value(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("(;C[never closed")
        assert exc_info.value.kind == LexErrorKind.UNTERMINATED_VALUE
        assert (exc_info.value.line, exc_info.value.column) == (1, 4)

    def test_value_ending_in_escape_is_unterminated(self) -> None:
        with pytest.raises(LexError) as exc_info:
            tokenize("(;C[abc\\]")
        assert exc_info.value.kind == LexErrorKind.UNTERMINATED_VALUE


# ###############
# Positions
# ###############


class TestPositions:
    def test_line_and_column_tracking(self) -> None:
        tokens = _tokens_no_eof("(;\n  B[aa])")
        ident = tokens[2]
        assert ident.value == "B"
        assert (ident.line, ident.column, ident.offset) == (2, 3, 5)

    def test_lines_inside_values_are_counted(self) -> None:
        tokens = _tokens_no_eof("(;C[a\nb]\nB[aa])")
        move = tokens[4]
        assert move.value == "B"
        assert move.line == 3

    def test_error_message_carries_position(self) -> None:
        with pytest.raises(ParseError, match=r"Line 1, column 3"):
            tokenize("(;?)")
