"""Observer port for the evaluation domain — defines events in domain language."""

from typing import Protocol


class EvaluationObserver(Protocol):
    """Observer port emitting structured events while approaches are evaluated.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def approach_registered(self, approach: str, replaced: bool) -> None: ...

    def evaluation_started(self, approach: str, total_test_cases: int) -> None: ...

    def test_case_started(
        self, approach: str, test_case_id: str, test_case_name: str
    ) -> None: ...

    def test_case_completed(
        self, approach: str, test_case_id: str, total_predictions: int
    ) -> None: ...

    def evaluation_completed(
        self,
        approach: str,
        accuracy: float,
        correct_predictions: int,
        total_predictions: int,
        execution_time_seconds: float,
    ) -> None: ...

    def evaluation_failed(self, approach: str, reason: str) -> None: ...

    def dispose_failed(self, approach: str, reason: str) -> None: ...
