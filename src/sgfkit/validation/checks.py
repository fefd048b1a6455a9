# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""FF[4] node rules for parsed SGF collections.

Parsing guarantees that every value has the right type. These checks go one
step further and enforce the rules FF[4] places on how properties combine
within a node and along a line of play. They never modify the collection.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from sgfkit.model.tree import Collection, GameTree, Node
from sgfkit.model.types import GoPoint
from sgfkit.model.values import NumberValue, PointValue
from sgfkit.properties.registry import PropertyCategory, identifiers_in_category

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A questionable but legal construct.

    Attributes:
        message: Human-readable description of the warning.
        node_path: Index path of the node concerned (see
            :class:`~sgfkit.compiler.value_analysis.PropertyValueError`).
    """

    message: str
    node_path: tuple[int, ...] = ()


@dataclass(frozen=True)
class ValidationError:
    """A violation of the FF[4] node rules.

    Attributes:
        message: Human-readable description of the error.
        node_path: Index path of the offending node.
    """

    message: str
    node_path: tuple[int, ...] = ()


@dataclass
class ValidationResult:
    """Result of running the node rules over a collection.

    Attributes:
        warnings: Non-fatal findings.
        errors: Rule violations.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any rule violations were found."""
        return len(self.errors) > 0


def validate(collection: Collection) -> ValidationResult:
    """Check a collection against the FF[4] node rules.

    Errors:

    - B and W in the same node.
    - Move properties and setup properties in the same node.
    - KO in a node without a move.
    - More than one move annotation (BM, DO, IT, TE) in a node, or a move
      annotation in a node without a move.
    - More than one of DM, UC, GB, GW in a node.
    - The same point marked by more than one of CR, MA, SL, SQ, TR.
    - Game-info properties in a node and again in one of its descendants.

    Warnings:

    - A game other than Go, whose point values are kept uninterpreted.
    - A root without FF, or with a file format older than FF[4].

    Args:
        collection: The parsed collection to check.

    Returns:
        The collected warnings and errors.
    """
    result = ValidationResult()
    for index, game in enumerate(collection):
        _check_root(game, index, result)
        _check_game(game, index, result)
    return result


# ################
# Implementation
# ################

_MOVE_ANNOTATIONS = ("BM", "DO", "IT", "TE")
_POSITION_ANNOTATIONS = ("DM", "UC", "GB", "GW")
_MARKUP = ("CR", "MA", "SL", "SQ", "TR")
_CURRENT_FILE_FORMAT = 4


def _describe(path: tuple[int, ...]) -> str:
    return f"Game {path[0]}, node {'.'.join(str(i) for i in path[1:])}"


def _check_root(game: GameTree, index: int, result: ValidationResult) -> None:
    path = (index, 0)
    if not game.game_type.is_go:
        result.warnings.append(
            ValidationWarning(
                f"{_describe(path)}: game {game.game_type.number} ({game.game_type.name}) "
                "is not Go; point values are kept as written",
                path,
            )
        )
    file_format = game.root.get("FF")
    if file_format is None:
        result.warnings.append(ValidationWarning(f"{_describe(path)}: no FF property, FF[1] is implied", path))
    elif isinstance(file_format.value, NumberValue) and file_format.value.value < _CURRENT_FILE_FORMAT:
        result.warnings.append(
            ValidationWarning(f"{_describe(path)}: file format FF[{file_format.value.value}] predates FF[4]", path)
        )


def _walk(game: GameTree, index: int) -> Iterator[tuple[Node, tuple[int, ...], bool]]:
    """Yield each node with its path and whether an ancestor holds game-info."""
    pending: list[tuple[GameTree, tuple[int, ...], bool]] = [(game, (index,), False)]
    game_info = identifiers_in_category(PropertyCategory.GAME_INFO, game.game_type)
    while pending:
        tree, prefix, info_above = pending.pop()
        for position, node in enumerate(tree.sequence):
            yield node, prefix + (position,), info_above
            info_above = info_above or any(identifier in game_info for identifier in node.identifiers)
        for variation in reversed(range(len(tree.children))):
            pending.append((tree.children[variation], prefix + (variation,), info_above))


def _check_game(game: GameTree, index: int, result: ValidationResult) -> None:
    move_properties = identifiers_in_category(PropertyCategory.MOVE, game.game_type)
    setup_properties = identifiers_in_category(PropertyCategory.SETUP, game.game_type)
    game_info = identifiers_in_category(PropertyCategory.GAME_INFO, game.game_type)

    for node, path, info_above in _walk(game, index):
        where = _describe(path)
        identifiers = set(node.identifiers)
        has_move = "B" in identifiers or "W" in identifiers

        if "B" in identifiers and "W" in identifiers:
            result.errors.append(ValidationError(f"{where}: B and W in the same node", path))

        moves = sorted(identifiers & move_properties)
        setups = sorted(identifiers & setup_properties)
        if moves and setups:
            result.errors.append(
                ValidationError(
                    f"{where}: move properties ({', '.join(moves)}) mixed with "
                    f"setup properties ({', '.join(setups)})",
                    path,
                )
            )

        if "KO" in identifiers and not has_move:
            result.errors.append(ValidationError(f"{where}: KO without a move", path))

        annotations = [a for a in _MOVE_ANNOTATIONS if a in identifiers]
        if len(annotations) > 1:
            result.errors.append(
                ValidationError(f"{where}: more than one move annotation ({', '.join(annotations)})", path)
            )
        if annotations and not has_move:
            result.errors.append(
                ValidationError(f"{where}: move annotation {annotations[0]} without a move", path)
            )

        positions = [a for a in _POSITION_ANNOTATIONS if a in identifiers]
        if len(positions) > 1:
            result.errors.append(
                ValidationError(f"{where}: more than one position annotation ({', '.join(positions)})", path)
            )

        _check_markup(node, where, path, result)

        if info_above and identifiers & game_info:
            result.errors.append(
                ValidationError(f"{where}: game-info properties already set in an ancestor node", path)
            )


def _check_markup(node: Node, where: str, path: tuple[int, ...], result: ValidationResult) -> None:
    marked: dict[GoPoint | str, str] = {}
    for identifier in _MARKUP:
        prop = node.get(identifier)
        if prop is None:
            continue
        for value in prop.values:
            if not isinstance(value, PointValue):
                continue
            earlier = marked.setdefault(value.point, identifier)
            if earlier != identifier:
                result.errors.append(
                    ValidationError(f"{where}: point marked by both {earlier} and {identifier}", path)
                )
