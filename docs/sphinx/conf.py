# Copyright 2026 sgfkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for sgfkit documentation."""

project = "sgfkit"
author = "sgfkit Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
