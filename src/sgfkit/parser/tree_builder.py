# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tree builder for SGF token streams.

Assembles the token stream produced by the scanner into raw game trees.
Property values stay as raw chunks here; typing them against the property
registry is the job of :mod:`sgfkit.compiler.value_analysis`.

Game trees are built with an explicit stack rather than recursion, so the
nesting depth of the input is bounded only by available memory.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from sgfkit.errors import ParseError
from sgfkit.parser.lexer import Token, TokenType

# ###############
# Public Interface
# ###############


@dataclass
class RawProperty:
    """A property identifier with its unparsed value chunks."""

    identifier: str
    chunks: list[str]
    line: int
    column: int
    offset: int = 0


@dataclass
class RawNode:
    """A node whose properties have not been typed yet."""

    properties: dict[str, RawProperty] = field(default_factory=dict)
    line: int = 1
    column: int = 1
    offset: int = 0


@dataclass
class RawGameTree:
    """A sequence of raw nodes followed by zero or more variations."""

    sequence: list[RawNode] = field(default_factory=list)
    children: list[RawGameTree] = field(default_factory=list)
    line: int = 1
    column: int = 1
    offset: int = 0


class StructureErrorKind(enum.Enum):
    """Ways the shape of an SGF collection can be malformed."""

    UNBALANCED_PARENTHESES = "unbalanced parentheses"
    EMPTY_GAME_TREE = "empty game tree"
    DUPLICATE_PROPERTY = "duplicate property"
    UNEXPECTED_TOKEN = "unexpected token"


class StructureError(ParseError):
    """Raised when the token stream does not form a well-shaped collection.

    Attributes:
        kind: The specific structural failure.
    """

    def __init__(
        self,
        kind: StructureErrorKind,
        message: str,
        line: int,
        column: int,
        offset: int = 0,
    ) -> None:
        super().__init__(message, line, column, offset)
        self.kind = kind


def build_trees(tokens: list[Token]) -> list[RawGameTree]:
    """Assemble a token stream into raw game trees.

    Args:
        tokens: Tokens produced by :func:`sgfkit.parser.lexer.tokenize`,
            ending with an EOF token.

    Returns:
        The top-level game trees in input order. Empty when the token stream
        holds nothing but EOF.

    Raises:
        StructureError: On unbalanced parentheses, a game tree without a
            node, a property repeated within one node, or a token out of
            place (e.g. a node after the variations of its tree).
    """
    return _TreeBuilder(tokens).build()


# ################
# Implementation
# ################


class _TreeBuilder:
    """Stack-based assembler for SGF token streams."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def build(self) -> list[RawGameTree]:
        """Consume the full token stream and return the top-level trees."""
        result: list[RawGameTree] = []
        open_trees: list[RawGameTree] = []

        while not self._at_end():
            tok = self._current()
            if tok.type == TokenType.TREE_OPEN:
                self._advance()
                tree = RawGameTree(line=tok.line, column=tok.column, offset=tok.offset)
                if open_trees:
                    open_trees[-1].children.append(tree)
                else:
                    result.append(tree)
                open_trees.append(tree)
                self._expect_first_node(tok)
            elif tok.type == TokenType.NODE_START:
                if not open_trees:
                    raise self._error(StructureErrorKind.UNEXPECTED_TOKEN, "Node outside of a game tree", tok)
                tree = open_trees[-1]
                if tree.children:
                    raise self._error(
                        StructureErrorKind.UNEXPECTED_TOKEN,
                        "Node after the variations of a game tree",
                        tok,
                    )
                tree.sequence.append(self._parse_node())
            elif tok.type == TokenType.TREE_CLOSE:
                if not open_trees:
                    raise self._error(StructureErrorKind.UNBALANCED_PARENTHESES, "Unmatched ')'", tok)
                self._advance()
                open_trees.pop()
            else:
                raise self._error(
                    StructureErrorKind.UNEXPECTED_TOKEN,
                    f"Unexpected {tok.type.name.lower().replace('_', ' ')} {tok.value!r} outside of a node",
                    tok,
                )

        if open_trees:
            unclosed = open_trees[-1]
            raise StructureError(
                StructureErrorKind.UNBALANCED_PARENTHESES,
                "Game tree is never closed",
                unclosed.line,
                unclosed.column,
                unclosed.offset,
            )
        return result

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        """Return the current (un-consumed) token."""
        return self._tokens[self._pos]

    def _at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self._tokens[self._pos].type == TokenType.EOF

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types."""
        return self._tokens[self._pos].type in types

    @staticmethod
    def _error(kind: StructureErrorKind, message: str, tok: Token) -> StructureError:
        return StructureError(kind, message, tok.line, tok.column, tok.offset)

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _expect_first_node(self, open_tok: Token) -> None:
        """Check that a freshly opened game tree starts with a node."""
        if self._check(TokenType.NODE_START):
            return
        if self._check(TokenType.TREE_OPEN, TokenType.TREE_CLOSE):
            raise self._error(StructureErrorKind.EMPTY_GAME_TREE, "Game tree without any node", open_tok)
        if self._at_end():
            raise self._error(StructureErrorKind.UNBALANCED_PARENTHESES, "Game tree is never closed", open_tok)
        tok = self._current()
        raise self._error(StructureErrorKind.UNEXPECTED_TOKEN, f"Expected ';', got {tok.value!r}", tok)

    def _parse_node(self) -> RawNode:
        """Parse: ';' (Identifier ValueChunk+)*"""
        start = self._advance()  # ;
        node = RawNode(line=start.line, column=start.column, offset=start.offset)
        while self._check(TokenType.IDENTIFIER):
            ident_tok = self._advance()
            if not self._check(TokenType.VALUE_CHUNK):
                raise self._error(
                    StructureErrorKind.UNEXPECTED_TOKEN,
                    f"Property {ident_tok.value!r} has no value",
                    ident_tok,
                )
            chunks: list[str] = []
            while self._check(TokenType.VALUE_CHUNK):
                chunks.append(self._advance().value)
            if ident_tok.value in node.properties:
                raise self._error(
                    StructureErrorKind.DUPLICATE_PROPERTY,
                    f"Property {ident_tok.value!r} appears more than once in a node",
                    ident_tok,
                )
            node.properties[ident_tok.value] = RawProperty(
                identifier=ident_tok.value,
                chunks=chunks,
                line=ident_tok.line,
                column=ident_tok.column,
                offset=ident_tok.offset,
            )
        if self._check(TokenType.VALUE_CHUNK):
            raise self._error(
                StructureErrorKind.UNEXPECTED_TOKEN,
                "Property value without an identifier",
                self._current(),
            )
        return node
