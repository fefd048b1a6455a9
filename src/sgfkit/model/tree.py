# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Game-tree entities of the SGF data model: properties, nodes, game trees, collections.

Every entity is a frozen pydantic model with tuple containers, so a parsed
tree is an immutable value. Use :mod:`sgfkit.model.builder` to construct or
edit trees.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import Field as _Field

from sgfkit.model.types import BoardSize, Color, GameType
from sgfkit.model.values import MoveValue, PropertyValue

# ###############
# Public Interface
# ###############


class Property(BaseModel):
    """An identifier with its ordered, typed values."""

    model_config = ConfigDict(frozen=True)

    identifier: str = _Field(pattern=r"^[A-Z]+$")
    values: tuple[PropertyValue, ...] = ()

    @property
    def value(self) -> PropertyValue:
        """Return the only value of a single-valued property.

        Raises:
            ValueError: If the property does not hold exactly one value.
        """
        if len(self.values) != 1:
            raise ValueError(f"Property {self.identifier!r} holds {len(self.values)} values, not one")
        return self.values[0]


class Node(BaseModel):
    """One step of a game record: an insertion-ordered set of properties."""

    model_config = ConfigDict(frozen=True)

    properties: tuple[Property, ...] = ()

    @model_validator(mode="after")
    def _check_unique_identifiers(self) -> Node:
        seen: set[str] = set()
        for prop in self.properties:
            if prop.identifier in seen:
                raise ValueError(f"Property {prop.identifier!r} appears more than once in a node")
            seen.add(prop.identifier)
        return self

    def get(self, identifier: str) -> Property | None:
        """Return the property with the given identifier, or None."""
        for prop in self.properties:
            if prop.identifier == identifier:
                return prop
        return None

    def __getitem__(self, identifier: str) -> Property:
        prop = self.get(identifier)
        if prop is None:
            raise KeyError(identifier)
        return prop

    def __contains__(self, identifier: object) -> bool:
        return any(prop.identifier == identifier for prop in self.properties)

    def __iter__(self) -> Iterator[Property]:  # type: ignore[override]
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    @property
    def identifiers(self) -> tuple[str, ...]:
        return tuple(prop.identifier for prop in self.properties)

    @property
    def move(self) -> tuple[Color, MoveValue] | None:
        """Return the colour and move of a B or W property, if the node has one."""
        for color in (Color.BLACK, Color.WHITE):
            prop = self.get(color.value)
            if prop is not None and prop.values and isinstance(prop.values[0], MoveValue):
                return color, prop.values[0]
        return None


class GameTree(BaseModel):
    """A non-empty sequence of nodes followed by zero or more variations.

    Attributes:
        sequence: The nodes of this tree, in order. The first node of a
            top-level tree is its root node.
        children: The variations that follow the last node of the sequence.
        game_type: The game recorded, from the GM property of the root.
        board_size: The board size from the SZ property of the root; for Go
            the default 19x19 applies when SZ is absent. None for other games
            without SZ.

    Equality walks the variations without recursion, so trees of any depth
    compare. pydantic's dumping and validation still recurse: JSON export
    and import are limited to about a thousand levels of nested variations.
    """

    model_config = ConfigDict(frozen=True)

    sequence: tuple[Node, ...] = _Field(min_length=1)
    children: tuple[GameTree, ...] = ()
    game_type: GameType = _Field(default_factory=GameType)
    board_size: BoardSize | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameTree):
            return NotImplemented
        pending: list[tuple[GameTree, GameTree]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if (
                left.sequence != right.sequence
                or left.game_type != right.game_type
                or left.board_size != right.board_size
                or len(left.children) != len(right.children)
            ):
                return False
            pending.extend(zip(left.children, right.children, strict=True))
        return True

    def __hash__(self) -> int:
        return hash((self.sequence, self.game_type, self.board_size, len(self.children)))

    @property
    def root(self) -> Node:
        return self.sequence[0]

    @property
    def variations(self) -> tuple[GameTree, ...]:
        return self.children

    def main_variation(self) -> Iterator[Node]:
        """Yield the nodes of the left-most line of play."""
        tree = self
        while True:
            yield from tree.sequence
            if not tree.children:
                return
            tree = tree.children[0]

    def nodes(self) -> Iterator[Node]:
        """Yield every node of the tree, depth first, in document order."""
        pending: list[GameTree] = [self]
        while pending:
            tree = pending.pop()
            yield from tree.sequence
            pending.extend(reversed(tree.children))


class Collection(BaseModel):
    """The ordered game trees of one SGF file; the top-level parse result."""

    model_config = ConfigDict(frozen=True)

    games: tuple[GameTree, ...] = ()

    def __iter__(self) -> Iterator[GameTree]:  # type: ignore[override]
        return iter(self.games)

    def __len__(self) -> int:
        return len(self.games)

    def __getitem__(self, index: int) -> GameTree:
        return self.games[index]


# Resolve forward references in self-referential models.
GameTree.model_rebuild()
