"""Observer port for the test-case domain — defines events in domain language."""

from typing import Protocol


class TestCaseObserver(Protocol):
    __test__ = False

    def loading_started(self, source: str, path: str | None) -> None: ...

    def test_case_loaded(self, test_case_id: str, ground_truth_count: int) -> None: ...

    def loading_completed(self, source: str, total_test_cases: int) -> None: ...

    def loading_failed(self, source: str, reason: str) -> None: ...
