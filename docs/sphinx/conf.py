# Copyright 2026 Regg Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for Regg documentation."""

project = "Regg"
author = "Regg Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
