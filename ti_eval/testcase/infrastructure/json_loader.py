"""JSON test-case loader — reads JSONL files or directories of JSON files into TestCases."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ti_eval.config.domain.test_cases import TestCaseSource, TestCaseSourceConfig
from ti_eval.testcase.domain.observer import TestCaseObserver
from ti_eval.testcase.domain.test_case import TestCase
from ti_eval.testcase.infrastructure.errors import TestCaseLoadError


class JsonTestCaseLoader:
    """Loads TestCase value objects from JSON on disk.

    ``jsonl`` sources hold one TestCase object per non-empty line. ``directory``
    sources hold ``*.json`` files, read in name order, each containing one
    TestCase object or a list of them.
    """

    def __init__(self, observer: TestCaseObserver) -> None:
        self._observer = observer

    def load(self, config: TestCaseSourceConfig) -> list[TestCase]:
        """
        Load all test cases from the source described by config.

        Collects ALL problems (bad encoding, invalid JSON, schema violations,
        duplicate ids) before raising a single TestCaseLoadError listing every
        issue found.

        Raises:
            TestCaseLoadError: if the path cannot be read or any entry is invalid.
        """
        source = config.source
        if source is TestCaseSource.SAMPLES or config.path is None:
            raise TestCaseLoadError(reason=f"source '{source}' is not file-backed")

        path_str = str(config.path)
        self._observer.loading_started(source=source, path=path_str)

        try:
            entries = self._read_entries(source=source, path=config.path)
        except (FileNotFoundError, NotADirectoryError) as exc:
            reason = f"path not found: {path_str}"
            self._observer.loading_failed(source=source, reason=reason)
            raise TestCaseLoadError(reason=reason) from exc
        except OSError as exc:
            reason = f"cannot read {path_str}: {exc.strerror or exc}"
            self._observer.loading_failed(source=source, reason=reason)
            raise TestCaseLoadError(reason=reason) from exc

        test_cases, errors = self._parse_entries(entries=entries)
        errors.extend(_duplicate_id_errors(test_cases))

        if errors:
            reason = "; ".join(errors)
            self._observer.loading_failed(source=source, reason=reason)
            raise TestCaseLoadError(reason=reason)

        self._observer.loading_completed(
            source=source, total_test_cases=len(test_cases)
        )
        return test_cases

    def _read_entries(self, source: TestCaseSource, path: Path) -> list[tuple[str, bytes]]:
        """Return (location, raw bytes) pairs in load order.

        Bytes are decoded per entry while parsing, so one badly encoded line
        or file is reported alongside every other problem.
        """
        if source is TestCaseSource.JSONL:
            return [
                (f"{path.name}:{index + 1}", line)
                for index, line in enumerate(path.read_bytes().splitlines())
                if line.strip()
            ]

        if not path.is_dir():
            raise NotADirectoryError(path)
        return [(file.name, file.read_bytes()) for file in sorted(path.glob("*.json"))]

    def _parse_entries(
        self, entries: list[tuple[str, bytes]]
    ) -> tuple[list[TestCase], list[str]]:
        """Parse each entry, collecting errors without aborting early."""
        test_cases: list[TestCase] = []
        errors: list[str] = []

        for location, raw in entries:
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError:
                errors.append(f"{location}: not valid UTF-8")
                continue
            try:
                data: Any = json.loads(text)
            except json.JSONDecodeError as exc:
                errors.append(f"{location}: invalid JSON: {exc}")
                continue

            items = data if isinstance(data, list) else [data]
            for offset, item in enumerate(items):
                label = location if len(items) == 1 else f"{location}[{offset}]"
                result = self._parse_item(item=item, location=label)
                if isinstance(result, str):
                    errors.append(result)
                else:
                    test_cases.append(result)
                    self._observer.test_case_loaded(
                        test_case_id=result.id,
                        ground_truth_count=len(result.ground_truth),
                    )

        return test_cases, errors

    def _parse_item(self, item: Any, location: str) -> TestCase | str:
        """Return a TestCase on success, or an error string describing the problem."""
        if not isinstance(item, dict):
            return f"{location}: expected a JSON object"
        try:
            return TestCase.model_validate(item)
        except ValidationError as exc:
            fields = ", ".join(
                ".".join(str(part) for part in error["loc"]) for error in exc.errors()
            )
            return f"{location}: invalid test case ({fields})"


def _duplicate_id_errors(test_cases: list[TestCase]) -> list[str]:
    seen: set[str] = set()
    duplicates: list[str] = []
    for test_case in test_cases:
        if test_case.id in seen and test_case.id not in duplicates:
            duplicates.append(test_case.id)
        seen.add(test_case.id)
    return [f"duplicate test case id '{case_id}'" for case_id in duplicates]
