# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for assembling token streams into raw game trees."""

import pytest

from sgfkit.parser.lexer import tokenize
from sgfkit.parser.tree_builder import RawGameTree, StructureError, StructureErrorKind, build_trees

# ###############
# Test Helpers
# ###############


def _build(source: str) -> list[RawGameTree]:
    return build_trees(tokenize(source))


def _structure_error(source: str) -> StructureError:
    with pytest.raises(StructureError) as exc_info:
        _build(source)
    return exc_info.value


# ###############
# Well-formed Collections
# ###############


class TestWellFormed:
    def test_empty_input_yields_no_trees(self) -> None:
        assert _build("") == []
        assert _build(" \n ") == []

    def test_single_node(self) -> None:
        trees = _build("(;FF[4]GM[1])")
        assert len(trees) == 1
        [node] = trees[0].sequence
        assert list(node.properties) == ["FF", "GM"]
        assert node.properties["FF"].chunks == ["4"]

    def test_sequence_of_nodes(self) -> None:
        trees = _build("(;GM[1];B[aa];W[bb])")
        assert [list(n.properties) for n in trees[0].sequence] == [["GM"], ["B"], ["W"]]

    def test_empty_node(self) -> None:
        trees = _build("(;)")
        assert trees[0].sequence[0].properties == {}

    def test_variations(self) -> None:
        trees = _build("(;GM[1](;B[aa];W[bb])(;B[cc]))")
        root = trees[0]
        assert len(root.sequence) == 1
        assert len(root.children) == 2
        assert len(root.children[0].sequence) == 2
        assert root.children[1].sequence[0].properties["B"].chunks == ["cc"]

    def test_multiple_game_trees(self) -> None:
        trees = _build("(;GM[1])(;GM[2])")
        assert [t.sequence[0].properties["GM"].chunks for t in trees] == [["1"], ["2"]]

    def test_property_keeps_value_order(self) -> None:
        trees = _build("(;AB[cc][aa][bb])")
        assert trees[0].sequence[0].properties["AB"].chunks == ["cc", "aa", "bb"]

    def test_property_position(self) -> None:
        trees = _build("(;GM[1]\n;B[aa])")
        prop = trees[0].sequence[1].properties["B"]
        assert (prop.line, prop.column) == (2, 2)

    def test_deep_nesting_does_not_recurse(self) -> None:
        depth = 5000
        source = "(;B[aa]" * depth + ")" * depth
        trees = _build(source)
        tree = trees[0]
        levels = 1
        while tree.children:
            tree = tree.children[0]
            levels += 1
        assert levels == depth


# ###############
# Structural Errors
# ###############


class TestStructureErrors:
    def test_unclosed_tree(self) -> None:
        err = _structure_error("(;B[aa]")
        assert err.kind == StructureErrorKind.UNBALANCED_PARENTHESES
        assert (err.line, err.column) == (1, 1)

    def test_unclosed_nested_tree_reports_innermost(self) -> None:
        err = _structure_error("(;B[aa](;W[bb]")
        assert err.kind == StructureErrorKind.UNBALANCED_PARENTHESES
        assert err.column == 8

    def test_unmatched_close(self) -> None:
        err = _structure_error("(;B[aa]))")
        assert err.kind == StructureErrorKind.UNBALANCED_PARENTHESES

    def test_open_at_end_of_input(self) -> None:
        assert _structure_error("(").kind == StructureErrorKind.UNBALANCED_PARENTHESES

    def test_empty_game_tree(self) -> None:
        assert _structure_error("()").kind == StructureErrorKind.EMPTY_GAME_TREE

    def test_tree_without_node_before_variation(self) -> None:
        assert _structure_error("((;B[aa]))").kind == StructureErrorKind.EMPTY_GAME_TREE

    def test_duplicate_property(self) -> None:
        err = _structure_error("(;B[aa]B[bb])")
        assert err.kind == StructureErrorKind.DUPLICATE_PROPERTY
        assert err.column == 8

    def test_same_property_in_different_nodes_is_fine(self) -> None:
        assert len(_build("(;B[aa];B[bb])")[0].sequence) == 2

    def test_node_after_variations(self) -> None:
        err = _structure_error("(;GM[1](;B[aa]);W[bb])")
        assert err.kind == StructureErrorKind.UNEXPECTED_TOKEN

    def test_node_outside_tree(self) -> None:
        assert _structure_error(";B[aa]").kind == StructureErrorKind.UNEXPECTED_TOKEN

    def test_identifier_without_value(self) -> None:
        assert _structure_error("(;B)").kind == StructureErrorKind.UNEXPECTED_TOKEN

    def test_value_without_identifier(self) -> None:
        assert _structure_error("(;[aa])").kind == StructureErrorKind.UNEXPECTED_TOKEN

    def test_tree_must_start_with_node(self) -> None:
        assert _structure_error("(B[aa])").kind == StructureErrorKind.UNEXPECTED_TOKEN

    def test_property_outside_node(self) -> None:
        assert _structure_error("B[aa]").kind == StructureErrorKind.UNEXPECTED_TOKEN
