# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parse and serialize entry points tying the pipeline stages together.

Parsing runs three stages: the lexer turns text into tokens, the tree
builder assembles tokens into raw game trees, and value analysis types
every property. Each stage raises on its first error.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path

from sgfkit.compiler.serializer import serialize
from sgfkit.compiler.value_analysis import analyze
from sgfkit.config import SgfConfig
from sgfkit.io import read_sgf_text, write_sgf_text
from sgfkit.model.tree import Collection
from sgfkit.model.values import SimpleTextValue
from sgfkit.parser.lexer import tokenize
from sgfkit.parser.tree_builder import build_trees

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

DEFAULT_OUTPUT_CHARSET = "UTF-8"


def parse(text: str, *, config: SgfConfig | None = None) -> Collection:
    """Parse SGF text into a typed collection.

    Args:
        text: The SGF text. Empty or whitespace-only text yields an empty
            collection.
        config: Parse options; defaults to :class:`SgfConfig` defaults.

    Raises:
        LexError: If the text cannot be split into tokens.
        StructureError: If the tokens do not form a valid collection.
        PropertyValueError: If a property value is invalid.
    """
    config = config or SgfConfig()
    tokens = tokenize(text, old_style_identifiers=config.old_style_identifiers)
    logger.debug("Scanned %d tokens", len(tokens))
    raw_trees = build_trees(tokens)
    logger.debug("Built %d game trees", len(raw_trees))
    return analyze(raw_trees)


def parse_file(path: Path, *, config: SgfConfig | None = None) -> Collection:
    """Read, decode and parse an SGF file.

    Raises:
        SgfIOError: If the file cannot be read or decoded.
        ParseError: If the content is not valid SGF.
    """
    config = config or SgfConfig()
    text = read_sgf_text(path, default_charset=config.default_charset)
    logger.debug("Parsing %s", path)
    return parse(text, config=config)


def serialize_file(
    collection: Collection,
    path: Path,
    *,
    config: SgfConfig | None = None,
    encoding: str | None = None,
) -> None:
    """Serialize a collection and write it to *path*.

    The charset is, in order of precedence: *encoding*, the configured output
    charset, the CA property of the first game, UTF-8.

    Raises:
        SgfIOError: If the text cannot be encoded or written.
    """
    config = config or SgfConfig()
    charset = encoding or config.output_charset or collection_charset(collection) or DEFAULT_OUTPUT_CHARSET
    logger.debug("Writing %s as %s", path, charset)
    write_sgf_text(path, serialize(collection, config=config), encoding=charset)


def collection_charset(collection: Collection) -> str | None:
    """Return the charset named by the CA property of the first game, if Python knows it."""
    if not collection.games:
        return None
    prop = collection.games[0].root.get("CA")
    if prop is None or not prop.values or not isinstance(prop.values[0], SimpleTextValue):
        return None
    charset = prop.values[0].text.strip()
    try:
        codecs.lookup(charset)
    except LookupError:
        logger.warning("Unknown charset %r in CA property, writing %s", charset, DEFAULT_OUTPUT_CHARSET)
        return None
    return charset
