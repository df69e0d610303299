# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader for composite test case documents: sources, settings, and expectations."""

from casefile.reader.document import LineKind, classify_line, parse_sources_and_settings
from casefile.reader.expectations import parse_simple_expectations
from casefile.reader.external import resolve_external_source
from casefile.reader.imports import ImportExtractor, extract_imports
from casefile.reader.settings import SettingsStore
from casefile.reader.testcase import TestCaseReader

__all__ = [
    "parse_sources_and_settings",
    "classify_line",
    "LineKind",
    "resolve_external_source",
    "ImportExtractor",
    "extract_imports",
    "SettingsStore",
    "parse_simple_expectations",
    "TestCaseReader",
]
