"""Tests for JsonTestCaseLoader."""

from pathlib import Path

import pytest

from ti_eval.config.domain.test_cases import TestCaseSource, TestCaseSourceConfig
from ti_eval.testcase.infrastructure.errors import TestCaseLoadError
from ti_eval.testcase.infrastructure.json_loader import JsonTestCaseLoader
from tests.testcase.fake_observer import FakeTestCaseObserver

FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _jsonl(name: str) -> TestCaseSourceConfig:
    return TestCaseSourceConfig(source=TestCaseSource.JSONL, path=FIXTURES / name)


class TestJsonlLoading:
    def test_loads_every_non_empty_line(self) -> None:
        observer = FakeTestCaseObserver()
        test_cases = JsonTestCaseLoader(observer=observer).load(
            config=_jsonl("test_cases.jsonl")
        )

        assert [case.id for case in test_cases] == ["jsonl-001", "jsonl-002"]
        assert observer.loaded == [("jsonl-001", 2), ("jsonl-002", 1)]
        assert observer.completed == [{"source": "jsonl", "total_test_cases": 2}]

    def test_parses_nested_models(self) -> None:
        test_cases = JsonTestCaseLoader(observer=FakeTestCaseObserver()).load(
            config=_jsonl("test_cases.jsonl")
        )

        first = test_cases[0]
        assert first.source_code == "const count = 1;\nconst total = count + 1;"
        assert first.ground_truth[1].identifier == "total"
        assert first.ground_truth[1].position.line == 2
        assert first.metadata is not None
        assert first.metadata.difficulty == "easy"
        assert test_cases[1].metadata is None

    def test_collects_every_problem_before_raising(self) -> None:
        observer = FakeTestCaseObserver()
        with pytest.raises(TestCaseLoadError) as exc_info:
            JsonTestCaseLoader(observer=observer).load(
                config=_jsonl("test_cases_invalid.jsonl")
            )

        message = str(exc_info.value)
        assert "test_cases_invalid.jsonl:2: invalid JSON" in message
        assert "test_cases_invalid.jsonl:3: invalid test case (source_code)" in message
        assert len(observer.failed) == 1
        assert observer.completed == []

    def test_duplicate_ids_are_rejected(self) -> None:
        with pytest.raises(TestCaseLoadError, match="duplicate test case id 'dup'"):
            JsonTestCaseLoader(observer=FakeTestCaseObserver()).load(
                config=_jsonl("test_cases_duplicate.jsonl")
            )

    def test_missing_file(self) -> None:
        observer = FakeTestCaseObserver()
        with pytest.raises(TestCaseLoadError, match="path not found"):
            JsonTestCaseLoader(observer=observer).load(config=_jsonl("missing.jsonl"))
        assert observer.failed[0]["source"] == "jsonl"

    def test_directory_given_as_jsonl_path(self, tmp_path: Path) -> None:
        observer = FakeTestCaseObserver()
        config = TestCaseSourceConfig(source=TestCaseSource.JSONL, path=tmp_path)

        with pytest.raises(TestCaseLoadError, match="cannot read"):
            JsonTestCaseLoader(observer=observer).load(config=config)
        assert len(observer.failed) == 1
        assert observer.completed == []

    def test_invalid_utf8_line_is_collected_with_other_problems(
        self, tmp_path: Path
    ) -> None:
        path = tmp_path / "cases.jsonl"
        path.write_bytes(
            b'{"id": "a", "name": "\xff", "source_code": ""}\n'
            b'{"id": "b", "name": "B"}\n'
        )
        observer = FakeTestCaseObserver()

        with pytest.raises(TestCaseLoadError) as exc_info:
            JsonTestCaseLoader(observer=observer).load(
                config=TestCaseSourceConfig(source=TestCaseSource.JSONL, path=path)
            )

        message = str(exc_info.value)
        assert "cases.jsonl:1: not valid UTF-8" in message
        assert "cases.jsonl:2: invalid test case (source_code)" in message
        assert len(observer.failed) == 1


class TestDirectoryLoading:
    def test_loads_json_files_in_name_order(self) -> None:
        config = TestCaseSourceConfig(
            source=TestCaseSource.DIRECTORY, path=FIXTURES / "cases_dir"
        )
        test_cases = JsonTestCaseLoader(observer=FakeTestCaseObserver()).load(
            config=config
        )

        assert [case.id for case in test_cases] == ["dir-001", "dir-002", "dir-003"]
        assert test_cases[0].ground_truth[0].actual_type == "boolean"

    def test_path_must_be_a_directory(self) -> None:
        config = TestCaseSourceConfig(
            source=TestCaseSource.DIRECTORY, path=FIXTURES / "test_cases.jsonl"
        )
        with pytest.raises(TestCaseLoadError, match="path not found"):
            JsonTestCaseLoader(observer=FakeTestCaseObserver()).load(config=config)

    def test_invalid_utf8_file_is_reported(self, tmp_path: Path) -> None:
        (tmp_path / "bad.json").write_bytes(b'{"id": "x", "name": "\xfe"}')
        config = TestCaseSourceConfig(source=TestCaseSource.DIRECTORY, path=tmp_path)

        with pytest.raises(TestCaseLoadError, match="bad.json: not valid UTF-8"):
            JsonTestCaseLoader(observer=FakeTestCaseObserver()).load(config=config)

    def test_empty_directory_yields_no_test_cases(self, tmp_path: Path) -> None:
        config = TestCaseSourceConfig(source=TestCaseSource.DIRECTORY, path=tmp_path)
        assert JsonTestCaseLoader(observer=FakeTestCaseObserver()).load(config=config) == []

    def test_samples_source_is_not_file_backed(self) -> None:
        with pytest.raises(TestCaseLoadError):
            JsonTestCaseLoader(observer=FakeTestCaseObserver()).load(
                config=TestCaseSourceConfig()
            )
