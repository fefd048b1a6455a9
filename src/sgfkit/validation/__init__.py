# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""FF[4] node rules for SGF collections (move/setup mixing, annotations, markup)."""

from sgfkit.validation.checks import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
