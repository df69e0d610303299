# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for casefile documentation."""

project = "casefile"
author = "CaseFile Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
