"""StructlogEvaluationObserver — production observer that delegates to structlog."""

import structlog


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def approach_registered(self, approach: str, replaced: bool) -> None:
        if replaced:
            self._log.warning("evaluation.approach_replaced", approach=approach)
            return
        self._log.debug("evaluation.approach_registered", approach=approach)

    def evaluation_started(self, approach: str, total_test_cases: int) -> None:
        self._log.info(
            "evaluation.started",
            approach=approach,
            total_test_cases=total_test_cases,
        )

    def test_case_started(
        self, approach: str, test_case_id: str, test_case_name: str
    ) -> None:
        self._log.info(
            "evaluation.test_case_started",
            approach=approach,
            test_case_id=test_case_id,
            test_case_name=test_case_name,
        )

    def test_case_completed(
        self, approach: str, test_case_id: str, total_predictions: int
    ) -> None:
        self._log.debug(
            "evaluation.test_case_completed",
            approach=approach,
            test_case_id=test_case_id,
            total_predictions=total_predictions,
        )

    def evaluation_completed(
        self,
        approach: str,
        accuracy: float,
        correct_predictions: int,
        total_predictions: int,
        execution_time_seconds: float,
    ) -> None:
        self._log.info(
            "evaluation.completed",
            approach=approach,
            accuracy=round(accuracy, 4),
            correct_predictions=correct_predictions,
            total_predictions=total_predictions,
            execution_time_seconds=round(execution_time_seconds, 4),
        )

    def evaluation_failed(self, approach: str, reason: str) -> None:
        self._log.error("evaluation.failed", approach=approach, reason=reason)

    def dispose_failed(self, approach: str, reason: str) -> None:
        self._log.warning("evaluation.dispose_failed", approach=approach, reason=reason)
