# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the parsed document and model checker setting models."""

import pydantic
import pytest

from casefile.model import GroupedNameSet, ParsedDocument, SourceMap, TargetSet, VerificationTarget


def test_source_map_main_source() -> None:
    source_map = SourceMap(sources={"a": "A", "b": "B"}, main_source_name="a")
    assert source_map.main_source == "A"
    assert source_map.names() == ["a", "b"]


def test_models_are_frozen() -> None:
    source_map = SourceMap(sources={"": "x"})
    with pytest.raises(pydantic.ValidationError):
        source_map.main_source_name = "other"  # type: ignore[misc]


def test_parsed_document_json_round_trip() -> None:
    doc = ParsedDocument(
        source_map=SourceMap(sources={"a": "A\n"}, main_source_name="a"),
        settings={"k": "v"},
        line_number=4,
    )
    assert ParsedDocument.model_validate_json(doc.model_dump_json()) == doc


def test_target_set_all() -> None:
    targets = TargetSet.all()
    assert targets.has(VerificationTarget.OUT_OF_BOUNDS)
    assert len(targets.names()) == 8


def test_empty_grouped_name_set() -> None:
    groups = GroupedNameSet()
    assert groups.groups == {}
    assert not groups.has("a.sol", "A")


def test_source_map_contents_are_read_only() -> None:
    source_map = SourceMap(sources={"a": "A"}, main_source_name="a")
    with pytest.raises(TypeError):
        source_map.sources["b"] = "B"  # type: ignore[index]
    assert source_map.sources == {"a": "A"}


def test_parsed_document_settings_are_read_only() -> None:
    raw = {"k": "v"}
    doc = ParsedDocument(source_map=SourceMap(), settings=raw)
    with pytest.raises(TypeError):
        doc.settings["k"] = "other"  # type: ignore[index]
    raw["k"] = "changed"
    assert doc.settings == {"k": "v"}


def test_grouped_name_set_groups_are_read_only() -> None:
    groups = GroupedNameSet(groups={"a.sol": frozenset({"A"})})
    with pytest.raises(TypeError):
        groups.groups["b.sol"] = frozenset({"B"})  # type: ignore[index]
    assert GroupedNameSet().groups == {}
    assert groups.model_dump() == {"groups": {"a.sol": frozenset({"A"})}}
