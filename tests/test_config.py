# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from sgfkit.config import CONFIG_FILE_NAME, SgfConfig, find_config, load_config
from sgfkit.errors import ConfigError

# ###############
# Helpers
# ###############


def _write_config(directory: Path, content: str) -> Path:
    """Write a config file into *directory* and return its path."""
    config_file = directory / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_defaults() -> None:
    """The default configuration writes unwrapped output with a trailing newline."""
    config = SgfConfig()
    assert config.wrap_width == 0
    assert config.trailing_newline
    assert not config.old_style_identifiers
    assert config.default_charset == "ISO-8859-1"
    assert config.output_charset is None


def test_full_config(tmp_path: Path) -> None:
    """Every option is read from its hyphenated key."""
    content = """\
wrap-width: 80
trailing-newline: false
old-style-identifiers: true
default-charset: UTF-8
output-charset: ISO-8859-1
"""
    config = load_config(_write_config(tmp_path, content))

    assert config.wrap_width == 80
    assert not config.trailing_newline
    assert config.old_style_identifiers
    assert config.default_charset == "UTF-8"
    assert config.output_charset == "ISO-8859-1"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty config file is equivalent to no config."""
    assert load_config(_write_config(tmp_path, "")) == SgfConfig()


def test_python_names_are_accepted() -> None:
    """Options may be given by field name as well as by key."""
    assert SgfConfig(wrap_width=40).wrap_width == 40


def test_config_is_immutable() -> None:
    config = SgfConfig()
    with pytest.raises(ValidationError):
        config.wrap_width = 10  # type: ignore[misc]


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    """A missing config file raises ConfigError."""
    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(tmp_path / CONFIG_FILE_NAME)


def test_invalid_yaml(tmp_path: Path) -> None:
    """Malformed YAML raises ConfigError."""
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "wrap-width: [80\n"))


def test_unknown_key(tmp_path: Path) -> None:
    """Unknown keys are rejected so that typos do not go unnoticed."""
    with pytest.raises(ConfigError, match="Invalid config file"):
        load_config(_write_config(tmp_path, "wrap-widht: 80\n"))


def test_negative_wrap_width(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write_config(tmp_path, "wrap-width: -1\n"))


def test_unknown_charset(tmp_path: Path) -> None:
    """A charset Python does not know is rejected when the config is loaded."""
    with pytest.raises(ConfigError, match="unknown charset"):
        load_config(_write_config(tmp_path, "default-charset: no-such-charset\n"))


def test_not_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write_config(tmp_path, "- wrap-width\n"))


# ###############
# Discovery
# ###############


def test_find_config_in_start_directory(tmp_path: Path) -> None:
    config_file = _write_config(tmp_path, "")
    assert find_config(tmp_path) == config_file.resolve()


def test_find_config_in_parent(tmp_path: Path) -> None:
    """The nearest config file above the start directory is found."""
    config_file = _write_config(tmp_path, "")
    nested = tmp_path / "games" / "2025"
    nested.mkdir(parents=True)
    assert find_config(nested) == config_file.resolve()


def test_find_config_prefers_nearest(tmp_path: Path) -> None:
    _write_config(tmp_path, "")
    nested = tmp_path / "games"
    nested.mkdir()
    nearest = _write_config(nested, "wrap-width: 72\n")
    assert find_config(nested) == nearest.resolve()


def test_no_config(tmp_path: Path) -> None:
    """Without a config file in the tree the search yields None."""
    nested = tmp_path / "empty"
    nested.mkdir()
    found = find_config(nested)
    assert found is None or not found.is_relative_to(tmp_path.resolve())
