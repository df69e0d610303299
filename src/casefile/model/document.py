# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsed representation of a composite test case document."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


def read_only(value: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only view of *value*."""
    return MappingProxyType(dict(value))


ReadOnlyStringMap = Annotated[
    Mapping[str, str],
    AfterValidator(read_only),
    PlainSerializer(lambda value: dict(value), return_type=dict[str, str]),
]
"""A ``str -> str`` mapping that cannot be modified after validation."""


class SourceMap(BaseModel):
    """Named source snippets of a test case plus the designated main source.

    The empty name ``""`` is used for a source section without an explicit
    ``==== Source: ... ====`` header.
    """

    model_config = ConfigDict(frozen=True)

    sources: ReadOnlyStringMap = _Field(default_factory=dict, validate_default=True)
    main_source_name: str = ""

    @property
    def main_source(self) -> str:
        """Return the text of the main source."""
        return self.sources[self.main_source_name]

    def names(self) -> list[str]:
        """Return the source names in sorted order."""
        return sorted(self.sources)


class ParsedDocument(BaseModel):
    """The sources and raw settings of a test case, as produced by the parser.

    Attributes:
        source_map: All sources, including those pulled in from external files.
        settings: Raw ``key -> value`` strings from the settings block.
        line_number: 1-based number of the first line following the
            expectations delimiter (one past the last line at end of input).
    """

    model_config = ConfigDict(frozen=True)

    source_map: SourceMap
    settings: ReadOnlyStringMap = _Field(default_factory=dict, validate_default=True)
    line_number: int = 1
