# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Property types, value encodings and escaping rules."""

from sgfkit.properties.encoding import (
    GenericEncoding,
    GoEncoding,
    InvalidValue,
    ValueErrorKind,
    encoding_for,
)
from sgfkit.properties.registry import (
    Cardinality,
    PropertyCategory,
    PropertyTypeSpec,
    ValueKind,
    lookup,
)
from sgfkit.properties.text import escape_text, simpletext_value, split_compose, text_value

__all__ = [
    "Cardinality",
    "GenericEncoding",
    "GoEncoding",
    "InvalidValue",
    "PropertyCategory",
    "PropertyTypeSpec",
    "ValueErrorKind",
    "ValueKind",
    "encoding_for",
    "escape_text",
    "lookup",
    "simpletext_value",
    "split_compose",
    "text_value",
]
