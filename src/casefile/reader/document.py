# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line-oriented parser for the sources and settings of a test case document.

A test case document has the following layout::

    ==== Source: a.sol ====
    contract A {}
    ==== ExternalSource: lib=lib/b.sol ====
    ==== Source: c.sol ====
    contract C {}
    // ====
    // SMTEngine: all
    // ----
    // expected output

The source section is split into named sources by ``==== Source: ... ====``
headers; the last one is the main source.  An optional settings block starts
at ``// ====`` and holds ``// key: value`` lines.  Parsing stops at the
``// ----`` line, leaving the remaining lines (the expectations) unconsumed.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from pathlib import Path

from casefile.errors import FormatError
from casefile.model.document import ParsedDocument, SourceMap
from casefile.reader.external import resolve_external_source
from casefile.reader.imports import ImportExtractor, extract_imports

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

SOURCE_DELIMITER_START = "==== Source:"
EXTERNAL_SOURCE_DELIMITER_START = "==== ExternalSource:"
SOURCE_DELIMITER_END = "===="
SETTINGS_DELIMITER = "// ===="
EXPECTATIONS_DELIMITER = "// ----"
SETTING_PREFIX = "// "


class LineKind(enum.Enum):
    """Classification of a single line of a test case document."""

    EXPECTATIONS = "expectations"
    SETTINGS = "settings"
    SOURCE = "source"
    EXTERNAL_SOURCE = "external_source"
    TEXT = "text"


def classify_line(line: str) -> LineKind:
    """Return the kind of *line*; delimiters take priority over source headers."""
    if line.startswith(EXPECTATIONS_DELIMITER):
        return LineKind.EXPECTATIONS
    if line.startswith(SETTINGS_DELIMITER):
        return LineKind.SETTINGS
    if line.startswith(SOURCE_DELIMITER_START) and line.endswith(SOURCE_DELIMITER_END):
        return LineKind.SOURCE
    if line.startswith(EXTERNAL_SOURCE_DELIMITER_START) and line.endswith(SOURCE_DELIMITER_END):
        return LineKind.EXTERNAL_SOURCE
    return LineKind.TEXT


def parse_sources_and_settings(
    lines: Iterable[str],
    path: Path | None = None,
    *,
    import_extractor: ImportExtractor = extract_imports,
    encoding: str = "utf-8",
) -> ParsedDocument:
    """Parse the source and settings sections of a test case document.

    Lines are consumed up to and including the expectations delimiter, so an
    iterator passed in is positioned at the first expectation line afterwards.

    Args:
        lines: The document lines, with or without trailing newlines.
        path: Path of the document; external sources are resolved relative to
            its directory.  Documents without a path cannot use external sources.
        import_extractor: Returns the import paths declared in a source text.
        encoding: Text encoding of external source files.

    Returns:
        The parsed sources, the raw settings, and the line number following
        the expectations delimiter.

    Raises:
        FormatError: If the document is structurally invalid.
        CaseFileIOError: If an external source or one of its imports cannot be read.
    """
    return _DocumentParser(path, import_extractor, encoding).parse(iter(lines))


# ################
# Implementation
# ################


class _State(enum.Enum):
    SOURCES = "sources"
    SETTINGS = "settings"


class _DocumentParser:
    """Two-state parser; all results are local until a complete parse returns."""

    def __init__(self, path: Path | None, import_extractor: ImportExtractor, encoding: str) -> None:
        self._path = path
        self._import_extractor = import_extractor
        self._encoding = encoding
        self._sources: dict[str, str] = {}
        self._settings: dict[str, str] = {}
        self._current_name = ""
        self._current_source: list[str] = []

    def parse(self, lines: Iterable[str]) -> ParsedDocument:
        state = _State.SOURCES
        line_number = 1
        for raw in lines:
            line_number += 1
            line = raw.removesuffix("\n")
            kind = classify_line(line)

            if kind is LineKind.EXPECTATIONS:
                break
            if kind is LineKind.SETTINGS:
                if state is _State.SOURCES:
                    logger.debug("Settings block starts at line %d", line_number - 1)
                state = _State.SETTINGS
            elif state is _State.SOURCES:
                self._handle_source_line(kind, line, line_number - 1)
            else:
                self._handle_setting_line(line, line_number - 1)

        # The last source section becomes the main source.
        self._sources[self._current_name] = "".join(self._current_source)
        return ParsedDocument(
            source_map=SourceMap(sources=self._sources, main_source_name=self._current_name),
            settings=self._settings,
            line_number=line_number,
        )

    def _handle_source_line(self, kind: LineKind, line: str, line_number: int) -> None:
        if kind is LineKind.SOURCE:
            if self._current_name or self._current_source:
                self._sources[self._current_name] = "".join(self._current_source)
            self._current_source = []
            self._current_name = _delimited_payload(line, SOURCE_DELIMITER_START)
            if self._current_name in self._sources:
                raise FormatError(f'Multiple definitions of test source "{self._current_name}".', line_number)
            logger.debug("Source '%s' starts at line %d", self._current_name, line_number)
        elif kind is LineKind.EXTERNAL_SOURCE:
            if self._path is None:
                raise FormatError("External sources require a test case file path.", line_number)
            payload = _delimited_payload(line, EXTERNAL_SOURCE_DELIMITER_START)
            base_dir = self._path.resolve().parent
            self._sources.update(
                resolve_external_source(
                    payload,
                    base_dir,
                    import_extractor=self._import_extractor,
                    encoding=self._encoding,
                )
            )
        else:
            self._current_source.append(line + "\n")

    def _handle_setting_line(self, line: str, line_number: int) -> None:
        if not line.startswith(SETTING_PREFIX):
            raise FormatError('Expected "//" or "// ---" to terminate settings and source.', line_number)
        colon = line.find(":")
        if colon == -1:
            raise FormatError('Expected ":" inside setting.', line_number)
        key = line[len(SETTING_PREFIX) : colon].strip()
        value = line[colon + 1 :].strip()
        self._settings[key] = value


def _delimited_payload(line: str, start: str) -> str:
    """Return the trimmed text between *start* and the closing delimiter."""
    end = max(len(start), len(line) - len(SOURCE_DELIMITER_END))
    return line[len(start) : end].strip()
