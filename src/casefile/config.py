# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the reader configuration file."""

from __future__ import annotations

import codecs
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from casefile.errors import ConfigurationError
from casefile.model.verification import GroupedNameSet

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".casefile.yaml"


class ReaderConfig(BaseModel):
    """Settings that apply to every test case read with this configuration.

    Attributes:
        encoding: Text encoding of test case documents and external sources.
        default_contracts: Contracts per source unit substituted for the
            ``default`` value of the ``SMTContracts`` setting.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    encoding: str = "utf-8"
    default_contracts: dict[str, list[str]] = Field(alias="default-contracts", default_factory=dict)

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding '{value}'") from None
        return value

    def default_grouped_names(self) -> GroupedNameSet:
        """Return :attr:`default_contracts` as a :class:`GroupedNameSet`."""
        return GroupedNameSet(groups={source: frozenset(names) for source, names in self.default_contracts.items()})


def load_reader_config(path: Path) -> ReaderConfig:
    """Load and validate a reader configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated ReaderConfig instance.

    Raises:
        ConfigurationError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigurationError(f"Reader config file not found: {path}") from None
    except OSError as exc:
        raise ConfigurationError(f"Cannot read reader config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in reader config '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: reader config must be a YAML mapping")

    try:
        return ReaderConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid reader config '{path}': {exc}") from exc
