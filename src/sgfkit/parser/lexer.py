# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for SGF text.

Converts decoded SGF text into the structural tokens consumed by the tree
builder. Bracketed values are delimited here but not interpreted: the chunk
text is kept with its escapes intact so later stages can still tell an
escaped ``:`` from a compose separator.
"""

import enum
from dataclasses import dataclass

from sgfkit.errors import ParseError

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the SGF lexer."""

    TREE_OPEN = "("
    TREE_CLOSE = ")"
    NODE_START = ";"
    IDENTIFIER = "IDENTIFIER"
    VALUE_CHUNK = "VALUE_CHUNK"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The identifier text, the raw chunk text between the brackets
            (escapes intact) for VALUE_CHUNK tokens, or the structural
            character itself.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
        offset: 0-based character offset where the token starts.
    """

    type: TokenType
    value: str
    line: int
    column: int
    offset: int = 0


class LexErrorKind(enum.Enum):
    """Reasons the scanner can reject its input."""

    UNTERMINATED_VALUE = "unterminated value"
    UNEXPECTED_CHARACTER = "unexpected character"


class LexError(ParseError):
    """Raised when the scanner meets an illegal character or an unclosed value.

    Attributes:
        kind: The specific lexical failure.
    """

    def __init__(self, kind: LexErrorKind, message: str, line: int, column: int, offset: int = 0) -> None:
        super().__init__(message, line, column, offset)
        self.kind = kind


def tokenize(source: str, *, old_style_identifiers: bool = False) -> list[Token]:
    """Tokenize SGF text into a sequence of tokens.

    The final token is always an EOF token. Whitespace outside brackets is
    consumed and not included in the output.

    Args:
        source: Decoded SGF text.
        old_style_identifiers: Accept FF[1]-FF[3] identifiers that mix in
            lowercase letters (``CoPyright``); the lowercase letters are
            dropped so the token carries the FF[4] name (``CP``).

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        LexError: On characters that are illegal outside brackets, or on a
            value that is never closed.
    """
    return _Lexer(source, old_style_identifiers).tokenize()


# ################
# Implementation
# ################

_STRUCTURAL_TOKENS: dict[str, TokenType] = {
    "(": TokenType.TREE_OPEN,
    ")": TokenType.TREE_CLOSE,
    ";": TokenType.NODE_START,
}

_BYTE_ORDER_MARK = "\ufeff"


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str, old_style_identifiers: bool) -> None:
        self._source = source
        self._old_style = old_style_identifiers
        self._pos = 0
        self._line = 1
        self._column = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        if self._source.startswith(_BYTE_ORDER_MARK):
            self._pos = 1
        while self._pos < len(self._source):
            self._skip_whitespace()
            if self._pos >= len(self._source):
                break
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", self._line, self._column, self._pos))
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and self._current().isspace():
            self._advance()

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch to the appropriate handler based on the current character."""
        ch = self._current()
        line = self._line
        col = self._column
        offset = self._pos

        if ch in _STRUCTURAL_TOKENS:
            self._advance()
            self._tokens.append(Token(_STRUCTURAL_TOKENS[ch], ch, line, col, offset))
        elif ch == "[":
            self._scan_value(line, col, offset)
        elif _is_upper(ch) or (self._old_style and _is_lower(ch)):
            self._scan_identifier(line, col, offset)
        else:
            raise LexError(
                LexErrorKind.UNEXPECTED_CHARACTER,
                f"Unexpected character: {ch!r}",
                line,
                col,
                offset,
            )

    def _scan_identifier(self, line: int, col: int, offset: int) -> None:
        """Scan a property identifier (a run of uppercase letters)."""
        letters: list[str] = []
        while self._pos < len(self._source):
            ch = self._current()
            if _is_upper(ch):
                letters.append(ch)
            elif not (self._old_style and _is_lower(ch)):
                break
            self._advance()
        if not letters:
            raise LexError(
                LexErrorKind.UNEXPECTED_CHARACTER,
                f"Property identifier without uppercase letters: {self._source[offset : self._pos]!r}",
                line,
                col,
                offset,
            )
        self._tokens.append(Token(TokenType.IDENTIFIER, "".join(letters), line, col, offset))

    def _scan_value(self, line: int, col: int, offset: int) -> None:
        """Scan a bracketed value, honouring backslash escapes."""
        self._advance()  # [
        start = self._pos
        while self._pos < len(self._source):
            ch = self._current()
            if ch == "]":
                chunk = self._source[start : self._pos]
                self._advance()  # ]
                self._tokens.append(Token(TokenType.VALUE_CHUNK, chunk, line, col, offset))
                return
            if ch == "\\":
                self._advance()
                if self._pos >= len(self._source):
                    break
            self._advance()
        raise LexError(LexErrorKind.UNTERMINATED_VALUE, "Unterminated property value", line, col, offset)
