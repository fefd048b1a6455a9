# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization of typed collections to SGF text.

The output is canonical FF[4]: one ``(`` per game tree, one ``;`` per node,
properties in node order, values escaped so that parsing the result yields
an equal collection. Optional wrapping only ever inserts line breaks between
tokens, where they are insignificant.
"""

from __future__ import annotations

from sgfkit.config import SgfConfig
from sgfkit.model.tree import Collection, GameTree, Property
from sgfkit.model.values import (
    ColorValue,
    ComposeValue,
    DoubleValue,
    MoveValue,
    NoneValue,
    NumberValue,
    PointValue,
    PropertyValue,
    RealValue,
    SimpleTextValue,
    StoneValue,
    TextValue,
    UnknownValue,
)
from sgfkit.properties.encoding import Encoding, encoding_for
from sgfkit.properties.text import escape_text

# ###############
# Public Interface
# ###############


def serialize(collection: Collection, *, config: SgfConfig | None = None) -> str:
    """Serialize a collection to SGF text.

    Args:
        collection: The collection to write.
        config: Layout options; defaults to :class:`SgfConfig` defaults.

    Returns:
        The SGF text. Games are separated by a line break.
    """
    config = config or SgfConfig()
    text = "\n".join(_write_game(game, config.wrap_width) for game in collection)
    if config.trailing_newline and text:
        text += "\n"
    return text


def serialize_game_tree(tree: GameTree, *, config: SgfConfig | None = None) -> str:
    """Serialize a single game tree, as it would appear inside a collection."""
    config = config or SgfConfig()
    text = _write_game(tree, config.wrap_width)
    if config.trailing_newline:
        text += "\n"
    return text


def encode_value(value: PropertyValue, encoding: Encoding, *, in_compose: bool = False) -> str:
    """Encode a typed value to the raw chunk written between its brackets.

    Args:
        value: The value to encode.
        encoding: The point encoding of the game the value belongs to.
        in_compose: The value is one half of a Compose value, so text
            colons must be escaped as well.
    """
    if isinstance(value, NumberValue):
        return str(value.value)
    if isinstance(value, RealValue):
        return format(value.value, "f")
    if isinstance(value, DoubleValue | ColorValue):
        return value.value.value
    if isinstance(value, SimpleTextValue | TextValue):
        return escape_text(value.text, escape_colon=in_compose)
    if isinstance(value, PointValue):
        return encoding.encode_point(value.point)
    if isinstance(value, MoveValue):
        return encoding.encode_move(value.point)
    if isinstance(value, StoneValue):
        return encoding.encode_stone(value.point)
    if isinstance(value, NoneValue):
        return ""
    if isinstance(value, ComposeValue):
        first = encode_value(value.first, encoding, in_compose=True)
        second = encode_value(value.second, encoding, in_compose=True)
        return f"{first}:{second}"
    if isinstance(value, UnknownValue):
        return value.raw
    raise TypeError(f"Cannot encode {type(value).__name__}")


def encode_property(prop: Property, encoding: Encoding) -> str:
    """Encode a property to its identifier followed by its bracketed values."""
    if not prop.values:
        return f"{prop.identifier}[]"
    return prop.identifier + "".join(f"[{encode_value(value, encoding)}]" for value in prop.values)


# ################
# Implementation
# ################


class _LineWriter:
    """Accumulates tokens, breaking lines between tokens at the wrap width."""

    def __init__(self, wrap_width: int) -> None:
        self._wrap_width = wrap_width
        self._parts: list[str] = []
        self._column = 0

    def write(self, token: str) -> None:
        if self._wrap_width and self._column and self._column + len(token) > self._wrap_width:
            self._parts.append("\n")
            self._column = 0
        self._parts.append(token)
        last_break = token.rfind("\n")
        if last_break == -1:
            self._column += len(token)
        else:
            self._column = len(token) - last_break - 1

    def getvalue(self) -> str:
        return "".join(self._parts)


def _write_game(game: GameTree, wrap_width: int) -> str:
    encoding = encoding_for(game.game_type, game.board_size)
    writer = _LineWriter(wrap_width)
    # None marks the point where a tree's closing parenthesis is due.
    pending: list[GameTree | None] = [game]
    while pending:
        tree = pending.pop()
        if tree is None:
            writer.write(")")
            continue
        writer.write("(")
        for node in tree.sequence:
            writer.write(";")
            for prop in node.properties:
                writer.write(encode_property(prop, encoding))
        pending.append(None)
        pending.extend(reversed(tree.children))
    return writer.getvalue()
