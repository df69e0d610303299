# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsers for model checker setting values."""

from casefile.verification.settings import DEFAULT, TARGET_KEYWORDS, parse_grouped_names, parse_targets

__all__ = [
    "DEFAULT",
    "TARGET_KEYWORDS",
    "parse_targets",
    "parse_grouped_names",
]
