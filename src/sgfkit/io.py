# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading and writing .sgf files in the charset their CA property names."""

from __future__ import annotations

import codecs
import logging
import re
from pathlib import Path

from sgfkit.errors import SgfIOError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

SGF_SUFFIX = ".sgf"


def detect_charset(data: bytes, default: str) -> str:
    """Return the charset named by the first CA property in *data*.

    The scan works on the raw bytes, which is sound because every charset
    SGF files use encodes the property syntax as ASCII.

    Args:
        data: The undecoded file content.
        default: Charset returned when there is no CA property or Python does
            not know the one it names.
    """
    match = _CHARSET_RE.search(data)
    if match is None:
        return default
    charset = match[1].decode("ascii", errors="ignore").strip()
    try:
        codecs.lookup(charset)
    except LookupError:
        logger.warning("Unknown charset %r in CA property, decoding as %s", charset, default)
        return default
    return charset


def read_sgf_text(path: Path, *, default_charset: str = "ISO-8859-1") -> str:
    """Read an SGF file and decode it.

    A UTF-8 byte order mark forces UTF-8; otherwise the CA property decides,
    falling back to *default_charset*.

    Raises:
        SgfIOError: If the file cannot be read or is not valid in its charset.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise SgfIOError(f"Cannot read SGF file '{path}': {exc}") from exc

    if data.startswith(codecs.BOM_UTF8):
        charset = "utf-8-sig"
    else:
        charset = detect_charset(data, default_charset)
    logger.debug("Decoding %s as %s", path, charset)

    try:
        return data.decode(charset)
    except UnicodeDecodeError as exc:
        raise SgfIOError(f"Cannot decode SGF file '{path}' as {charset}: {exc}") from exc


def write_sgf_text(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """Encode *text* and write it to *path*, creating parent directories as needed.

    Raises:
        SgfIOError: If the text cannot be encoded or the file cannot be written.
    """
    try:
        data = text.encode(encoding)
    except (UnicodeEncodeError, LookupError) as exc:
        raise SgfIOError(f"Cannot encode SGF text as {encoding}: {exc}") from exc
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise SgfIOError(f"Cannot write SGF file '{path}': {exc}") from exc


# ################
# Implementation
# ################

_CHARSET_RE = re.compile(rb"(?<![A-Za-z])CA\s*\[([^\]]*)\]")
