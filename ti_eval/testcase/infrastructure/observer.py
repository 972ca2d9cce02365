"""Structlog implementation of the TestCaseObserver port."""

import structlog


class StructlogTestCaseObserver:
    """Delegates test-case domain events to structlog.

    Satisfies the TestCaseObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def loading_started(self, source: str, path: str | None) -> None:
        self._log.info("test_cases.loading_started", source=source, path=path)

    def test_case_loaded(self, test_case_id: str, ground_truth_count: int) -> None:
        self._log.debug(
            "test_cases.test_case_loaded",
            test_case_id=test_case_id,
            ground_truth_count=ground_truth_count,
        )

    def loading_completed(self, source: str, total_test_cases: int) -> None:
        self._log.info(
            "test_cases.loading_completed",
            source=source,
            total_test_cases=total_test_cases,
        )

    def loading_failed(self, source: str, reason: str) -> None:
        self._log.error("test_cases.loading_failed", source=source, reason=reason)
