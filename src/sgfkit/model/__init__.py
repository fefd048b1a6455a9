# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""SGF data model: typed values, nodes, game trees, collections and their builders."""

from sgfkit.model.builder import CollectionBuilder, GameTreeBuilder, NodeBuilder
from sgfkit.model.tree import Collection, GameTree, Node, Property
from sgfkit.model.types import (
    DEFAULT_BOARD_SIZE,
    GAME_NAMES,
    BoardSize,
    Color,
    Double,
    GameType,
    GoPoint,
)
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

__all__ = [
    # Scalar types
    "GameType",
    "BoardSize",
    "DEFAULT_BOARD_SIZE",
    "GAME_NAMES",
    "Color",
    "Double",
    "GoPoint",
    # Values
    "NumberValue",
    "RealValue",
    "DoubleValue",
    "ColorValue",
    "SimpleTextValue",
    "TextValue",
    "PointValue",
    "MoveValue",
    "StoneValue",
    "NoneValue",
    "ComposeValue",
    "UnknownValue",
    "PropertyValue",
    # Trees
    "Property",
    "Node",
    "GameTree",
    "Collection",
    # Builders
    "NodeBuilder",
    "GameTreeBuilder",
    "CollectionBuilder",
]
