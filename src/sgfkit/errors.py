# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy shared by every sgfkit stage."""

# ###############
# Public Interface
# ###############


class SgfError(Exception):
    """Base class for all sgfkit errors."""


class ParseError(SgfError):
    """Raised when SGF text cannot be turned into a valid collection.

    Attributes:
        line: 1-based line number of the fault.
        column: 1-based column number of the fault.
        offset: 0-based character offset of the fault in the input text.
    """

    def __init__(self, message: str, line: int, column: int, offset: int = 0) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.message = message
        self.line = line
        self.column = column
        self.offset = offset


class ConfigError(SgfError):
    """Raised when a configuration file is invalid or cannot be loaded."""


class SgfIOError(SgfError):
    """Raised when an SGF file cannot be read, decoded, or written."""
