# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the high-level test case reader."""

from pathlib import Path

import pytest

from casefile.errors import CaseFileError, CaseFileIOError, ConfigurationError, FormatError
from casefile.reader.testcase import TestCaseReader

DATA_DIR = Path(__file__).parent.parent / "data" / "cases"

# ###############
# Reading files
# ###############


class TestFromFile:
    def test_multi_source_case(self) -> None:
        with TestCaseReader(DATA_DIR / "multi_source.sol") as reader:
            assert reader.sources.names() == ["a.sol", "b.sol"]
            assert reader.sources.main_source_name == "b.sol"
            assert reader.string_setting("SMTTargets", "default") == "overflow,divByZero"
            assert reader.string_setting("SMTContracts", "default") == "b.sol:B"
            reader.ensure_all_settings_read()
            assert reader.line_number == 12
            assert reader.simple_expectations() == "Warning: unreachable code\n\nInfo: done\n"

    def test_external_case(self) -> None:
        with TestCaseReader(DATA_DIR / "external.sol") as reader:
            assert set(reader.sources.sources) == {"lib", "util.sol", "ext/util.sol", "main.sol"}
            assert reader.sources.sources["util.sol"] == "library Util {}\n"
            assert reader.sources.main_source_name == "main.sol"
            assert reader.simple_expectations() == ""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CaseFileIOError, match="Cannot open file"):
            TestCaseReader(tmp_path / "missing.sol")

    def test_parse_error_closes_file(self, tmp_path: Path) -> None:
        case = tmp_path / "bad.sol"
        case.write_text("// ====\nnot a setting\n", encoding="utf-8")
        with pytest.raises(FormatError):
            TestCaseReader(case)

    def test_undecodable_document(self, tmp_path: Path) -> None:
        case = tmp_path / "bad.sol"
        case.write_bytes(b"contract C {}\n\xff\n")
        with pytest.raises(CaseFileIOError, match="Cannot decode test case"):
            TestCaseReader(case)

    def test_undecodable_expectations(self, tmp_path: Path) -> None:
        case = tmp_path / "bad.sol"
        # The invalid byte lies well past the first decoded chunk.
        case.write_bytes(b"contract C {}\n// ----\n" + b"// ok\n" * 5000 + b"// \xff\n")
        with TestCaseReader(case) as reader:
            with pytest.raises(CaseFileIOError, match="Cannot decode expectations"):
                reader.simple_expectations()

    def test_unknown_encoding(self, tmp_path: Path) -> None:
        case = tmp_path / "case.sol"
        case.write_text("contract C {}\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="bogus-enc"):
            TestCaseReader(case, encoding="bogus-enc")

    def test_read_failures_are_case_file_errors(self, tmp_path: Path) -> None:
        case = tmp_path / "case.sol"
        case.write_bytes(b"==== ExternalSource: lib.sol ====\n")
        (tmp_path / "lib.sol").write_bytes(b"\xff")
        with pytest.raises(CaseFileError):
            TestCaseReader(case)

    def test_external_source_relative_to_case_file(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "dep.sol").write_text("D\n", encoding="utf-8")
        case = tmp_path / "sub" / "case.sol"
        case.write_text("==== ExternalSource: dep.sol ====\nmain\n", encoding="utf-8")
        with TestCaseReader(case) as reader:
            assert reader.sources.sources == {"dep.sol": "D\n", "": "main\n"}


# ###############
# In-memory documents
# ###############


class TestFromString:
    def test_single_source(self) -> None:
        reader = TestCaseReader.from_string("contract C {}\n// ----\n// ok\n")
        assert reader.source() == "contract C {}\n"
        assert reader.simple_expectations() == "ok\n"

    def test_source_requires_single_definition(self) -> None:
        reader = TestCaseReader.from_string("==== Source: a ====\nx\n==== Source: b ====\ny\n")
        with pytest.raises(FormatError, match="Expected single source definition"):
            reader.source()

    def test_typed_settings(self) -> None:
        reader = TestCaseReader.from_string("x\n// ====\n// flag: true\n// n: 3\n// extra: 1\n")
        assert reader.bool_setting("flag", False) is True
        assert reader.size_setting("n", 0) == 3
        with pytest.raises(FormatError, match=r"Unknown setting\(s\): extra"):
            reader.ensure_all_settings_read()

    def test_malformed_expectations(self) -> None:
        reader = TestCaseReader.from_string("x\n// ----\n// hello\n//\noops\n")
        with pytest.raises(FormatError) as exc_info:
            reader.simple_expectations()
        assert exc_info.value.line == 5

    def test_external_source_not_supported(self) -> None:
        with pytest.raises(FormatError):
            TestCaseReader.from_string("==== ExternalSource: a.sol ====\n")
