# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Options for parsing and writing SGF, loadable from a YAML file."""

from __future__ import annotations

import codecs
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sgfkit.errors import ConfigError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".sgfkit.yaml"


class SgfConfig(BaseModel):
    """Parse and serialize options.

    Attributes:
        wrap_width: Wrap serialized output between property tokens once a line
            reaches this many characters; 0 disables wrapping.
        trailing_newline: End serialized output with a newline.
        old_style_identifiers: Accept FF[1]-FF[3] identifiers containing
            lowercase letters, such as ``CoPyright``.
        default_charset: Charset used to decode files without a CA property.
        output_charset: Charset used to write files; defaults to the
            collection's CA property, or UTF-8.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    wrap_width: int = Field(alias="wrap-width", default=0, ge=0)
    trailing_newline: bool = Field(alias="trailing-newline", default=True)
    old_style_identifiers: bool = Field(alias="old-style-identifiers", default=False)
    default_charset: str = Field(alias="default-charset", default="ISO-8859-1")
    output_charset: str | None = Field(alias="output-charset", default=None)

    @field_validator("default_charset", "output_charset")
    @classmethod
    def _check_charset(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                codecs.lookup(value)
            except LookupError:
                raise ValueError(f"unknown charset '{value}'") from None
        return value


def load_config(path: Path) -> SgfConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}

    try:
        return SgfConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(start: Path) -> Path | None:
    """Return the nearest config file in *start* or one of its parents."""
    directory = start.resolve()
    for candidate in (directory, *directory.parents):
        path = candidate / CONFIG_FILE_NAME
        if path.is_file():
            return path
    return None
