# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mutable builders for constructing and editing SGF collections.

Builders accept plain Python values as well as typed property values. On
:meth:`CollectionBuilder.finish` every value is encoded to the raw chunk it
would have in a file and typed by the same value analysis that
:func:`sgfkit.parse` runs, so a built collection satisfies exactly the
invariants of a parsed one.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Union

from pydantic import BaseModel

from sgfkit.model.tree import Collection, GameTree
from sgfkit.model.types import Color, Double, GameType, GoPoint
from sgfkit.parser.tree_builder import RawGameTree, RawNode, RawProperty, StructureError, StructureErrorKind
from sgfkit.properties.encoding import Encoding, GenericEncoding, encoding_for
from sgfkit.properties.registry import PropertyTypeSpec, ValueKind, lookup
from sgfkit.properties.text import escape_text

# ###############
# Public Interface
# ###############

# A value accepted by NodeBuilder.set. Tuples are composed values: a pair of
# halves, or a rectangle of points in a point list.
BuilderValue = Union[BaseModel, str, int, float, Decimal, Color, Double, GoPoint, None, tuple]


class NodeBuilder:
    """The properties of one node, in insertion order."""

    def __init__(self) -> None:
        self._properties: dict[str, tuple[BuilderValue, ...]] = {}

    def set(self, identifier: str, *values: BuilderValue) -> NodeBuilder:
        """Set a property, replacing any earlier values of the same identifier.

        With no values the property is written with one empty value, as
        ``KO[]`` or ``TB[]``.

        Raises:
            ValueError: If the identifier is not a run of uppercase letters.
        """
        if not _IDENTIFIER_RE.fullmatch(identifier):
            raise ValueError(f"Invalid property identifier {identifier!r}")
        self._properties[identifier] = values
        return self

    def remove(self, identifier: str) -> NodeBuilder:
        """Remove a property if the node has it."""
        self._properties.pop(identifier, None)
        return self

    def get(self, identifier: str) -> tuple[BuilderValue, ...] | None:
        return self._properties.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._properties

    @property
    def identifiers(self) -> tuple[str, ...]:
        return tuple(self._properties)

    def items(self) -> list[tuple[str, tuple[BuilderValue, ...]]]:
        return list(self._properties.items())


class GameTreeBuilder:
    """A game tree under construction: a node sequence and its variations."""

    def __init__(self) -> None:
        self.sequence: list[NodeBuilder] = []
        self.children: list[GameTreeBuilder] = []

    def node(self) -> NodeBuilder:
        """Append a node to the sequence and return it."""
        node = NodeBuilder()
        self.sequence.append(node)
        return node

    def variation(self) -> GameTreeBuilder:
        """Open a variation after the last node of the sequence and return it."""
        child = GameTreeBuilder()
        self.children.append(child)
        return child

    @property
    def root(self) -> NodeBuilder:
        """The first node of the sequence, created if the sequence is empty."""
        if not self.sequence:
            return self.node()
        return self.sequence[0]


class CollectionBuilder:
    """A collection under construction."""

    def __init__(self) -> None:
        self.games: list[GameTreeBuilder] = []

    def game(self) -> GameTreeBuilder:
        """Open a new top-level game tree and return it."""
        tree = GameTreeBuilder()
        self.games.append(tree)
        return tree

    @classmethod
    def from_collection(cls, collection: Collection) -> CollectionBuilder:
        """Start a builder holding a copy of *collection*.

        Values are kept typed. Changing GM or SZ re-types every point of the
        game when the builder is finished.
        """
        builder = cls()
        for game in collection:
            pending: list[tuple[GameTree, GameTreeBuilder]] = [(game, builder.game())]
            while pending:
                tree, tree_builder = pending.pop()
                for node in tree.sequence:
                    node_builder = tree_builder.node()
                    for prop in node.properties:
                        node_builder.set(prop.identifier, *prop.values)
                for child in tree.children:
                    pending.append((child, tree_builder.variation()))
        return builder

    def finish(self) -> Collection:
        """Type every value and return the immutable collection.

        Raises:
            StructureError: If a game tree or variation has no nodes.
            PropertyValueError: If a value is invalid for its property, as
                :func:`sgfkit.parse` would report it.
            TypeError: If a value has a Python type no SGF value maps to.
        """
        from sgfkit.compiler.value_analysis import analyze

        return analyze([_raw_game(game) for game in self.games])


# ################
# Implementation
# ################


def _raw_game(game: GameTreeBuilder) -> RawGameTree:
    if not game.sequence:
        raise _empty_tree_error()
    game_type, encoding = _resolve_encoding(game.sequence[0])
    raw_root = RawGameTree()
    pending: list[tuple[GameTreeBuilder, RawGameTree]] = [(game, raw_root)]
    while pending:
        tree_builder, raw = pending.pop()
        if not tree_builder.sequence:
            raise _empty_tree_error()
        raw.sequence = [_raw_node(node, game_type, encoding) for node in tree_builder.sequence]
        for child in tree_builder.children:
            raw_child = RawGameTree()
            raw.children.append(raw_child)
            pending.append((child, raw_child))
    return raw_root


def _resolve_encoding(root: NodeBuilder) -> tuple[GameType, Encoding]:
    from sgfkit.compiler.value_analysis import analyze

    # Type GM and SZ alone first; the encoding of every point depends on them.
    probe = RawNode()
    for identifier in ("GM", "SZ"):
        values = root.get(identifier)
        if values is not None:
            chunks = _chunks(values, identifier, GameType(), _GENERIC)
            probe.properties[identifier] = RawProperty(identifier, chunks, 0, 0)
    game = analyze([RawGameTree(sequence=[probe])]).games[0]
    return game.game_type, encoding_for(game.game_type, game.board_size)


def _raw_node(node: NodeBuilder, game_type: GameType, encoding: Encoding) -> RawNode:
    return RawNode(
        properties={
            identifier: RawProperty(identifier, _chunks(values, identifier, game_type, encoding), 0, 0)
            for identifier, values in node.items()
        }
    )


def _chunks(values: tuple[BuilderValue, ...], identifier: str, game_type: GameType, encoding: Encoding) -> list[str]:
    if not values:
        return [""]
    spec = lookup(identifier, game_type)
    return [_encode(value, spec, spec.kind, encoding) for value in values]


def _encode(
    value: BuilderValue,
    spec: PropertyTypeSpec,
    kind: ValueKind,
    encoding: Encoding,
    *,
    in_compose: bool = False,
) -> str:
    from sgfkit.compiler.serializer import encode_value

    if value is None:
        return ""
    if isinstance(value, BaseModel):
        return encode_value(value, encoding, in_compose=in_compose)  # type: ignore[arg-type]
    if isinstance(value, tuple):
        if len(value) != 2:
            raise TypeError(f"A composed value takes two halves, got {len(value)}")
        first_kind, second_kind = spec.composed or (kind, kind)
        first = _encode(value[0], spec, first_kind, encoding, in_compose=True)
        second = _encode(value[1], spec, second_kind, encoding, in_compose=True)
        return f"{first}:{second}"
    if isinstance(value, bool):
        raise TypeError("bool is not an SGF value")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    if isinstance(value, Color | Double):
        return value.value
    if isinstance(value, GoPoint):
        return encoding.encode_point(value)
    if isinstance(value, str):
        if kind in _TEXT_KINDS:
            return escape_text(value, escape_colon=in_compose)
        return value
    raise TypeError(f"Cannot use {type(value).__name__} as an SGF value")


def _empty_tree_error() -> StructureError:
    return StructureError(StructureErrorKind.EMPTY_GAME_TREE, "Game tree has no nodes", 0, 0)


_IDENTIFIER_RE = re.compile(r"[A-Z]+")
_TEXT_KINDS = frozenset({ValueKind.TEXT, ValueKind.SIMPLE_TEXT, ValueKind.UNKNOWN})
_GENERIC = GenericEncoding()
