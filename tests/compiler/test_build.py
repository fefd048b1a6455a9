# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the parse and serialize entry points."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from sgfkit.compiler.build import collection_charset, parse, parse_file, serialize_file
from sgfkit.config import SgfConfig
from sgfkit.errors import ParseError, SgfIOError
from sgfkit.model.values import SimpleTextValue, TextValue
from sgfkit.parser.lexer import LexError
from sgfkit.parser.tree_builder import StructureError, StructureErrorKind

# ###############
# Test data directory
# ###############

DATA_DIR = Path(__file__).parent.parent / "data"

# ###############
# Helpers
# ###############


def _write_bytes(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


# ###############
# Parsing Text
# ###############


class TestParse:
    @pytest.mark.parametrize("source", ["", "   \n\t "])
    def test_empty_input_yields_empty_collection(self, source: str) -> None:
        assert len(parse(source)) == 0

    def test_multiple_games(self) -> None:
        assert len(parse("(;GM[1])(;GM[1])(;GM[1])")) == 3

    def test_lex_error_propagates(self) -> None:
        with pytest.raises(LexError):
            parse("(;C[open")

    def test_structure_error_propagates(self) -> None:
        with pytest.raises(StructureError) as exc_info:
            parse("(;B[aa]")
        assert exc_info.value.kind == StructureErrorKind.UNBALANCED_PARENTHESES

    def test_all_stage_errors_are_parse_errors(self) -> None:
        for source in ("(;C[open", "(;B[aa]", "(;MN[x])"):
            with pytest.raises(ParseError):
                parse(source)

    def test_old_style_identifiers_are_configurable(self) -> None:
        with pytest.raises(LexError):
            parse("(;CoPyright[x])")
        collection = parse("(;CoPyright[x])", config=SgfConfig(old_style_identifiers=True))
        assert collection.games[0].root.identifiers == ("CP",)

    def test_stages_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="sgfkit.compiler.build"):
            parse("(;GM[1])")
        assert "Built 1 game trees" in caplog.text


# ###############
# Reading Files
# ###############


class TestParseFile:
    def test_sample_file(self) -> None:
        collection = parse_file(DATA_DIR / "annotated_game.sgf")
        game = collection.games[0]
        assert game.root["PB"].value == SimpleTextValue(text="Black Player")
        assert len(game.variations) == 2

    def test_charset_from_ca_property(self, tmp_path: Path) -> None:
        source = "(;CA[ISO-8859-1]C[Schöne Partie])".encode("latin-1")
        collection = parse_file(_write_bytes(tmp_path / "latin.sgf", source))
        assert collection.games[0].root["C"].value == TextValue(text="Schöne Partie")

    def test_default_charset_is_configurable(self, tmp_path: Path) -> None:
        path = _write_bytes(tmp_path / "game.sgf", "(;C[Ходы])".encode())
        collection = parse_file(path, config=SgfConfig(default_charset="utf-8"))
        assert collection.games[0].root["C"].value == TextValue(text="Ходы")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SgfIOError):
            parse_file(tmp_path / "missing.sgf")


# ###############
# Writing Files
# ###############


class TestSerializeFile:
    def test_default_charset_is_utf8(self, tmp_path: Path) -> None:
        out = tmp_path / "out" / "game.sgf"
        serialize_file(parse("(;C[Ходы])"), out)
        assert out.read_bytes() == "(;C[Ходы])\n".encode()

    def test_charset_from_ca_property(self, tmp_path: Path) -> None:
        out = tmp_path / "game.sgf"
        serialize_file(parse("(;CA[ISO-8859-1]C[Schöne])"), out)
        assert out.read_bytes() == "(;CA[ISO-8859-1]C[Schöne])\n".encode("latin-1")

    def test_explicit_encoding_wins(self, tmp_path: Path) -> None:
        out = tmp_path / "game.sgf"
        serialize_file(
            parse("(;CA[ISO-8859-1]C[Schöne])"),
            out,
            config=SgfConfig(output_charset="ISO-8859-1"),
            encoding="utf-8",
        )
        assert "Schöne" in out.read_text(encoding="utf-8")

    def test_configured_output_charset(self, tmp_path: Path) -> None:
        out = tmp_path / "game.sgf"
        serialize_file(parse("(;C[Schöne])"), out, config=SgfConfig(output_charset="latin-1"))
        assert out.read_bytes() == "(;C[Schöne])\n".encode("latin-1")

    def test_unencodable_text(self, tmp_path: Path) -> None:
        with pytest.raises(SgfIOError):
            serialize_file(parse("(;C[Ходы])"), tmp_path / "game.sgf", encoding="latin-1")

    def test_written_file_parses_back(self, tmp_path: Path) -> None:
        collection = parse_file(DATA_DIR / "annotated_game.sgf")
        out = tmp_path / "copy.sgf"
        serialize_file(collection, out)
        assert parse_file(out) == collection


class TestCollectionCharset:
    def test_no_games(self) -> None:
        assert collection_charset(parse("")) is None

    def test_no_ca_property(self) -> None:
        assert collection_charset(parse("(;GM[1])")) is None

    def test_unknown_charset_is_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="sgfkit.compiler.build"):
            assert collection_charset(parse("(;CA[no-such-charset])")) is None
        assert "no-such-charset" in caplog.text
