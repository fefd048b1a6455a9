# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and tree builder for SGF text."""

from sgfkit.parser.lexer import LexError, LexErrorKind, Token, TokenType, tokenize
from sgfkit.parser.tree_builder import (
    RawGameTree,
    RawNode,
    RawProperty,
    StructureError,
    StructureErrorKind,
    build_trees,
)

__all__ = [
    "tokenize",
    "Token",
    "TokenType",
    "LexError",
    "LexErrorKind",
    "build_trees",
    "RawGameTree",
    "RawNode",
    "RawProperty",
    "StructureError",
    "StructureErrorKind",
]
