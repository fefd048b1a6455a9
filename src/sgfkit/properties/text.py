# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Escaping rules for bracketed SGF values.

Raw chunks keep their backslash escapes; these helpers resolve them into the
Text and SimpleText strings they represent, split Compose values on their
first unescaped colon, and escape strings back into raw chunks.
"""

import re

# ###############
# Public Interface
# ###############


def text_value(raw: str) -> str:
    """Convert a raw Text chunk to the string it represents.

    - a backslash followed by a line break (soft break) disappears
    - any other line break (LF, CR, LFCR or CRLF) becomes a single LF
    - whitespace other than line breaks becomes a space
    - any other backslash escapes the character that follows it
    """
    return _resolve(raw, hard_break="\n")


def simpletext_value(raw: str) -> str:
    """Convert a raw SimpleText chunk to the string it represents.

    Follows the Text rules, except that line breaks which are not soft breaks
    become a single space, so the result never spans more than one line.
    """
    return _resolve(raw, hard_break=" ")


def escape_text(text: str, *, escape_colon: bool = False) -> str:
    """Convert a string to a raw chunk that represents it.

    Args:
        text: The decoded string.
        escape_colon: Also escape ``:``; required for the halves of a
            Compose value so the separator stays unambiguous.
    """
    escaped = text.replace("\\", "\\\\").replace("]", "\\]")
    if escape_colon:
        escaped = escaped.replace(":", "\\:")
    return escaped


def split_compose(raw: str) -> tuple[str, str] | None:
    """Split a raw Compose chunk on its first unescaped colon.

    Escapes are left untouched in both halves.

    Returns:
        The two raw halves, or None when the chunk has no unescaped colon.
    """
    m = _SPLIT_COMPOSE_RE.match(raw)
    if not m:
        return None
    return m.group(1), raw[m.end() :]


def is_valid_chunk(raw: str) -> bool:
    """Return True if *raw* can be written between brackets unchanged."""
    return _VALID_CHUNK_RE.fullmatch(raw) is not None


# ################
# Implementation
# ################

_NEWLINE_RE = re.compile(r"\n\r|\r\n|\n|\r")
_WHITESPACE_TABLE = str.maketrans("\t\f\v", "   ")
_SPLIT_COMPOSE_RE = re.compile(r"((?:[^\\:]|\\.)*):", re.DOTALL)
_VALID_CHUNK_RE = re.compile(r"(?:[^\\\]]|\\.)*", re.DOTALL)


def _resolve(raw: str, hard_break: str) -> str:
    text = _NEWLINE_RE.sub("\n", raw).translate(_WHITESPACE_TABLE)
    result: list[str] = []
    escaped = False
    for ch in text:
        if escaped:
            if ch != "\n":
                result.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == "\n":
            result.append(hard_break)
        else:
            result.append(ch)
    return "".join(result)
