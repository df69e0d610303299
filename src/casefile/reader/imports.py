# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Default import extraction for external sources.

Recognizes the import directive forms of Solidity-like source files::

    import "path";
    import "path" as Alias;
    import * as Alias from "path";
    import {A, B as C} from "path";

Comments and string contents are skipped so that commented-out directives
are not reported.
"""

from __future__ import annotations

import re
from collections.abc import Callable

# ###############
# Public Interface
# ###############

ImportExtractor = Callable[[str], list[str]]
"""Callable returning the import paths declared in a source text, in order."""


def extract_imports(source: str) -> list[str]:
    """Return the import paths declared in *source*, in declaration order."""
    return [m.group("path") for m in _SCANNER.finditer(source) if m.group("path") is not None]


# ################
# Implementation
# ################

# Comments and string literals are matched as whole tokens so that their
# contents are never scanned for import directives.
_SCANNER = re.compile(
    r"""
    //[^\n]*
    | /\*.*?\*/
    | \bimport\s+
      (?:(?:\*\s*as\s+\w+|\{[^}]*\})\s*from\s*)?
      (?P<quote>["'])(?P<path>(?:\\.|(?!(?P=quote))[^\\\n])*)(?P=quote)
      (?:\s*as\s+\w+)?
      \s*;
    | "(?:\\.|[^"\\\n])*"
    | '(?:\\.|[^'\\\n])*'
    """,
    re.DOTALL | re.VERBOSE,
)
