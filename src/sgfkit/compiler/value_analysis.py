# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value analysis for raw SGF game trees.

Types every raw property value against the property registry and the
coordinate encoding of its game, producing an immutable
:class:`~sgfkit.model.tree.Collection`. For each property the checks run in
a fixed order: cardinality, then the value of each chunk, then placement
of root properties. The first failure aborts the analysis; no partially
typed collection is ever returned.
"""

from __future__ import annotations

import re
from decimal import Decimal

from sgfkit.errors import ParseError
from sgfkit.model.tree import Collection, GameTree, Node, Property
from sgfkit.model.types import DEFAULT_BOARD_SIZE, BoardSize, Color, Double, GameType
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
from sgfkit.parser.tree_builder import RawGameTree, RawNode, RawProperty
from sgfkit.properties.encoding import Encoding, GenericEncoding, InvalidValue, ValueErrorKind, encoding_for
from sgfkit.properties.registry import Cardinality, PropertyTypeSpec, ValueKind, lookup
from sgfkit.properties.text import simpletext_value, split_compose, text_value

# ###############
# Public Interface
# ###############


class PropertyValueError(ParseError, ValueError):
    """Raised when a property value does not match its declared type.

    Attributes:
        kind: The category of the fault.
        identifier: The identifier of the offending property.
        node_path: Index path of the offending node: the game index, the
            variation index at each nesting level, then the node's index in
            its sequence.
    """

    def __init__(
        self,
        kind: ValueErrorKind,
        message: str,
        *,
        identifier: str,
        line: int,
        column: int,
        offset: int = 0,
        node_path: tuple[int, ...] = (),
    ) -> None:
        super().__init__(f"Property {identifier}: {message}", line, column, offset)
        self.kind = kind
        self.identifier = identifier
        self.node_path = node_path


def analyze(raw_trees: list[RawGameTree]) -> Collection:
    """Type the raw game trees of one collection.

    Args:
        raw_trees: The top-level trees produced by
            :func:`~sgfkit.parser.tree_builder.build_trees`.

    Returns:
        The typed collection.

    Raises:
        PropertyValueError: If any property value is invalid for its type,
            its cardinality, or its position.
    """
    return Collection(games=tuple(_GameAnalyzer(raw, index).analyze() for index, raw in enumerate(raw_trees)))


def parse_value(raw: str, kind: ValueKind, spec: PropertyTypeSpec, encoding: Encoding) -> PropertyValue:
    """Parse one raw chunk as a value of *kind*.

    Raises:
        InvalidValue: If the chunk is not a valid value of that kind.
    """
    if kind == ValueKind.NUMBER:
        return NumberValue(value=_parse_number(raw, spec.number_range))
    if kind == ValueKind.REAL:
        if not _REAL_RE.fullmatch(raw):
            raise InvalidValue(ValueErrorKind.INVALID_NUMBER, f"'{raw}' is not a real number")
        return RealValue(value=Decimal(raw))
    if kind == ValueKind.DOUBLE:
        if raw not in _DOUBLES:
            raise InvalidValue(ValueErrorKind.INVALID_DOUBLE, f"'{raw}' is not a double (expected 1 or 2)")
        return DoubleValue(value=Double(raw))
    if kind == ValueKind.COLOR:
        if raw not in _COLORS:
            raise InvalidValue(ValueErrorKind.INVALID_COLOR, f"'{raw}' is not a color (expected B or W)")
        return ColorValue(value=Color(raw))
    if kind == ValueKind.NONE:
        if raw:
            raise InvalidValue(ValueErrorKind.UNEXPECTED_VALUE, f"Expected an empty value, got '{raw}'")
        return NoneValue()
    if kind == ValueKind.SIMPLE_TEXT:
        return SimpleTextValue(text=simpletext_value(raw))
    if kind == ValueKind.TEXT:
        return TextValue(text=text_value(raw))
    if kind == ValueKind.POINT:
        return PointValue(point=encoding.decode_point(raw))
    if kind == ValueKind.MOVE:
        return MoveValue(point=encoding.decode_move(raw))
    if kind == ValueKind.STONE:
        return StoneValue(point=encoding.decode_stone(raw))
    if kind == ValueKind.COMPOSE:
        return _parse_compose(raw, spec, encoding)
    return UnknownValue(raw=raw)


# ################
# Implementation
# ################

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")
_REAL_RE = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")
_DOUBLES = frozenset(d.value for d in Double)
_COLORS = frozenset(c.value for c in Color)
_POINT_KINDS = frozenset({ValueKind.POINT, ValueKind.STONE})
_POINT_PAIR = (ValueKind.POINT, ValueKind.POINT)

# GM and SZ hold no points, so they are typed before the game's own encoding is known.
_ROOT_ENCODING = GenericEncoding()


def _parse_number(raw: str, number_range: tuple[int | None, int | None] | None) -> int:
    if not _NUMBER_RE.fullmatch(raw):
        raise InvalidValue(ValueErrorKind.INVALID_NUMBER, f"'{raw}' is not a number")
    number = int(raw)
    if number_range is not None:
        low, high = number_range
        if (low is not None and number < low) or (high is not None and number > high):
            bounds = f"{'' if low is None else low}..{'' if high is None else high}"
            raise InvalidValue(ValueErrorKind.NUMBER_OUT_OF_RANGE, f"{number} is outside the range {bounds}")
    return number


def _parse_compose(raw: str, spec: PropertyTypeSpec, encoding: Encoding) -> PropertyValue:
    assert spec.composed is not None
    first_kind, second_kind = spec.composed
    if spec.allows_none and raw == "":
        return NoneValue()
    halves = split_compose(raw)
    if halves is None:
        if spec.compose_optional:
            return parse_value(raw, first_kind, spec, encoding)
        raise InvalidValue(ValueErrorKind.INVALID_COMPOSE, f"'{raw}' is not a composed value (missing ':')")
    return ComposeValue(
        first=parse_value(halves[0], first_kind, spec, encoding),
        second=parse_value(halves[1], second_kind, spec, encoding),
    )


def _parse_values(chunks: list[str], spec: PropertyTypeSpec, encoding: Encoding) -> tuple[PropertyValue, ...]:
    if spec.kind == ValueKind.UNKNOWN:
        return tuple(UnknownValue(raw=chunk) for chunk in chunks)
    if spec.cardinality == Cardinality.SINGLE:
        if len(chunks) > 1:
            raise InvalidValue(ValueErrorKind.TOO_MANY_VALUES, f"Expected one value, got {len(chunks)}")
        if not chunks:
            raise InvalidValue(ValueErrorKind.MISSING_VALUE, "Expected one value, got none")
        return (parse_value(chunks[0], spec.kind, spec, encoding),)
    if not chunks or chunks == [""]:
        if spec.cardinality == Cardinality.ELIST:
            return ()
        raise InvalidValue(ValueErrorKind.MISSING_VALUE, "Expected at least one value")
    if spec.kind in _POINT_KINDS:
        value_type = PointValue if spec.kind == ValueKind.POINT else StoneValue
        return tuple(value_type(point=point) for point in encoding.decode_point_list(chunks))
    values = tuple(parse_value(chunk, spec.kind, spec, encoding) for chunk in chunks)
    if spec.composed == _POINT_PAIR:
        _check_point_pairs(values)
    return values


def _check_point_pairs(values: tuple[PropertyValue, ...]) -> None:
    # AR and LN: no pair may join a point to itself or appear twice.
    seen: set[tuple[object, object]] = set()
    for value in values:
        assert isinstance(value, ComposeValue)
        assert isinstance(value.first, PointValue) and isinstance(value.second, PointValue)
        pair = (value.first.point, value.second.point)
        if pair[0] == pair[1]:
            raise InvalidValue(ValueErrorKind.INVALID_COMPOSE, "Both ends of the pair are the same point")
        if pair in seen:
            raise InvalidValue(ValueErrorKind.DUPLICATE_POINT, "Pair listed more than once")
        seen.add(pair)


class _GameAnalyzer:
    """Types one top-level game tree and all of its variations."""

    def __init__(self, raw: RawGameTree, game_index: int) -> None:
        self._raw = raw
        self._game_index = game_index
        root = raw.sequence[0]
        root_path = (game_index, 0)
        self._game_type = self._resolve_game_type(root, root_path)
        self._board_size = self._resolve_board_size(root, root_path)
        self._encoding = encoding_for(self._game_type, self._board_size)

    def analyze(self) -> GameTree:
        # Type nodes in document order so the first fault in the text is the
        # one reported, then assemble the frozen trees children first.
        order: list[RawGameTree] = []
        sequences: dict[int, tuple[Node, ...]] = {}
        pending: list[tuple[RawGameTree, tuple[int, ...]]] = [(self._raw, (self._game_index,))]
        while pending:
            raw, path = pending.pop()
            order.append(raw)
            sequences[id(raw)] = tuple(
                self._analyze_node(node, path + (index,), is_root=raw is self._raw and index == 0)
                for index, node in enumerate(raw.sequence)
            )
            for index in reversed(range(len(raw.children))):
                pending.append((raw.children[index], path + (index,)))

        built: dict[int, GameTree] = {}
        for raw in reversed(order):
            built[id(raw)] = GameTree(
                sequence=sequences[id(raw)],
                children=tuple(built.pop(id(child)) for child in raw.children),
                game_type=self._game_type,
                board_size=self._board_size,
            )
        return built[id(self._raw)]

    def _analyze_node(self, node: RawNode, path: tuple[int, ...], *, is_root: bool) -> Node:
        properties: list[Property] = []
        for raw_prop in node.properties.values():
            spec = lookup(raw_prop.identifier, self._game_type)
            values = self._values(raw_prop, spec, path)
            if spec.root_only and not is_root:
                raise self._error(
                    raw_prop,
                    path,
                    InvalidValue(ValueErrorKind.ROOT_PROPERTY_MISPLACED, "Root property outside the root node"),
                )
            properties.append(Property(identifier=raw_prop.identifier, values=values))
        return Node(properties=tuple(properties))

    def _values(
        self,
        raw_prop: RawProperty,
        spec: PropertyTypeSpec,
        path: tuple[int, ...],
        encoding: Encoding | None = None,
    ) -> tuple[PropertyValue, ...]:
        try:
            return _parse_values(raw_prop.chunks, spec, encoding or self._encoding)
        except InvalidValue as exc:
            raise self._error(raw_prop, path, exc) from None

    def _resolve_game_type(self, root: RawNode, path: tuple[int, ...]) -> GameType:
        raw_prop = root.properties.get("GM")
        if raw_prop is None:
            return GameType()
        spec = lookup("GM", GameType())
        value = self._values(raw_prop, spec, path, _ROOT_ENCODING)[0]
        assert isinstance(value, NumberValue)
        return GameType(number=value.value)

    def _resolve_board_size(self, root: RawNode, path: tuple[int, ...]) -> BoardSize | None:
        raw_prop = root.properties.get("SZ")
        if raw_prop is None:
            return DEFAULT_BOARD_SIZE if self._game_type.is_go else None
        spec = lookup("SZ", self._game_type)
        value = self._values(raw_prop, spec, path, _ROOT_ENCODING)[0]
        if isinstance(value, ComposeValue):
            assert isinstance(value.first, NumberValue) and isinstance(value.second, NumberValue)
            return BoardSize(columns=value.first.value, rows=value.second.value)
        assert isinstance(value, NumberValue)
        return BoardSize(columns=value.value, rows=value.value)

    @staticmethod
    def _error(raw_prop: RawProperty, path: tuple[int, ...], exc: InvalidValue) -> PropertyValueError:
        return PropertyValueError(
            exc.kind,
            exc.message,
            identifier=raw_prop.identifier,
            line=raw_prop.line,
            column=raw_prop.column,
            offset=raw_prop.offset,
            node_path=path,
        )
