# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""sgfkit: parse, build, check and write SGF (Smart Game Format) collections."""

from sgfkit.compiler import (
    PropertyValueError,
    ValueErrorKind,
    parse,
    parse_file,
    serialize,
    serialize_file,
    serialize_game_tree,
)
from sgfkit.config import SgfConfig, load_config
from sgfkit.errors import ConfigError, ParseError, SgfError, SgfIOError
from sgfkit.model import (
    BoardSize,
    Collection,
    CollectionBuilder,
    GameTree,
    GameTreeBuilder,
    GameType,
    GoPoint,
    Node,
    NodeBuilder,
    Property,
)
from sgfkit.parser import LexError, LexErrorKind, StructureError, StructureErrorKind
from sgfkit.validation import ValidationResult, validate

__all__ = [
    "parse",
    "parse_file",
    "serialize",
    "serialize_file",
    "serialize_game_tree",
    "validate",
    "ValidationResult",
    "SgfConfig",
    "load_config",
    "BoardSize",
    "Collection",
    "GameTree",
    "GameType",
    "GoPoint",
    "Node",
    "Property",
    "CollectionBuilder",
    "GameTreeBuilder",
    "NodeBuilder",
    "SgfError",
    "ParseError",
    "LexError",
    "LexErrorKind",
    "StructureError",
    "StructureErrorKind",
    "PropertyValueError",
    "ValueErrorKind",
    "ConfigError",
    "SgfIOError",
]
