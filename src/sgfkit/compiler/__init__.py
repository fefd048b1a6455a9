# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""SGF pipeline: value analysis, serialization and the parse/serialize entry points."""

from sgfkit.compiler.build import parse, parse_file, serialize_file
from sgfkit.compiler.serializer import encode_value, serialize, serialize_game_tree
from sgfkit.compiler.value_analysis import PropertyValueError, analyze
from sgfkit.properties.encoding import ValueErrorKind

__all__ = [
    "parse",
    "parse_file",
    "serialize_file",
    "serialize",
    "serialize_game_tree",
    "encode_value",
    "analyze",
    "PropertyValueError",
    "ValueErrorKind",
]
