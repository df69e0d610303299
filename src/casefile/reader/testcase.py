# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level reader combining sources, settings, and expectations of one test case."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from casefile.errors import CaseFileIOError, ConfigurationError, FormatError
from casefile.model.document import SourceMap
from casefile.reader.document import parse_sources_and_settings
from casefile.reader.expectations import parse_simple_expectations
from casefile.reader.imports import ImportExtractor, extract_imports
from casefile.reader.settings import SettingsStore

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class TestCaseReader:
    """Reads a test case document and gives typed access to its parts.

    The sources and settings are parsed on construction.  The underlying
    stream stays positioned at the expectations block, which is read on
    demand by :meth:`simple_expectations`.

    Attributes:
        path: Path of the test case file, or None for in-memory documents.
        sources: The parsed sources.
        line_number: Line number of the first expectation line.
        settings: Consumption-tracked access to the settings block.
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        path: Path,
        *,
        import_extractor: ImportExtractor = extract_imports,
        encoding: str = "utf-8",
    ) -> None:
        self.path: Path | None = Path(path)
        try:
            stream: TextIO = self.path.open(encoding=encoding)
        except OSError as exc:
            raise CaseFileIOError(f'Cannot open file: "{path}".') from exc
        except LookupError as exc:
            raise ConfigurationError(f"Unknown test case encoding '{encoding}'") from exc
        logger.debug("Reading test case '%s'", self.path)
        try:
            self._init_from_stream(stream, import_extractor, encoding)
        except BaseException:
            stream.close()
            raise

    @classmethod
    def from_string(cls, text: str, *, import_extractor: ImportExtractor = extract_imports) -> TestCaseReader:
        """Create a reader for an in-memory document (external sources are not supported)."""
        reader = cls.__new__(cls)
        reader.path = None
        reader._init_from_stream(io.StringIO(text), import_extractor, "utf-8")
        return reader

    def __enter__(self) -> TestCaseReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying stream."""
        self._stream.close()

    def source(self) -> str:
        """Return the text of the only source of the test case.

        Raises:
            FormatError: If the test case defines more than one source.
        """
        if len(self.sources.sources) != 1:
            raise FormatError("Expected single source definition, but got multiple sources.")
        return self.sources.main_source

    def simple_expectations(self) -> str:
        """Parse and return the expected output following the ``// ----`` line."""
        try:
            return parse_simple_expectations(self._lines, first_line=self.line_number)
        except UnicodeDecodeError as exc:
            raise CaseFileIOError(f"Cannot decode expectations of test case '{self.path}': {exc}") from exc

    def bool_setting(self, name: str, default: bool) -> bool:
        return self.settings.get_bool(name, default)

    def size_setting(self, name: str, default: int) -> int:
        return self.settings.get_size(name, default)

    def string_setting(self, name: str, default: str) -> str:
        return self.settings.get_string(name, default)

    def ensure_all_settings_read(self) -> None:
        """Raise :class:`FormatError` if any setting was not read."""
        self.settings.ensure_all_read()

    # ################
    # Implementation
    # ################

    def _init_from_stream(self, stream: TextIO, import_extractor: ImportExtractor, encoding: str) -> None:
        self._stream = stream
        self._lines: Iterator[str] = iter(stream)
        try:
            document = parse_sources_and_settings(
                self._lines,
                self.path,
                import_extractor=import_extractor,
                encoding=encoding,
            )
        except UnicodeDecodeError as exc:
            raise CaseFileIOError(f"Cannot decode test case '{self.path}': {exc}") from exc
        self.sources: SourceMap = document.source_map
        self.line_number: int = document.line_number
        self.settings = SettingsStore(document.settings)
