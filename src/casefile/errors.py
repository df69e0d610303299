# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy shared by the test case reader and the setting parsers."""

from __future__ import annotations

# ###############
# Public Interface
# ###############


class CaseFileError(Exception):
    """Base class for all errors raised while reading a test case document."""


class FormatError(CaseFileError):
    """Raised when a document or setting value violates the expected syntax.

    Attributes:
        line: 1-based line number of the offending line, if known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        if line is not None:
            super().__init__(f"Line {line}: {message}")
        else:
            super().__init__(message)
        self.line = line


class CaseFileIOError(CaseFileError, OSError):
    """Raised when a test case, external source, or imported file cannot be read."""


class SourceNotFoundError(CaseFileIOError):
    """Raised when an external source or one of its imports does not exist."""


class ConfigurationError(CaseFileError):
    """Raised for unrecognized setting vocabulary and invalid reader configuration."""
