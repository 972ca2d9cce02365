"""CompositeEvaluationObserver — fans out all events to a list of observers."""

from ti_eval.evaluation.domain.observer import EvaluationObserver


class CompositeEvaluationObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[EvaluationObserver]) -> None:
        self._observers = observers

    def approach_registered(self, approach: str, replaced: bool) -> None:
        for obs in self._observers:
            obs.approach_registered(approach=approach, replaced=replaced)

    def evaluation_started(self, approach: str, total_test_cases: int) -> None:
        for obs in self._observers:
            obs.evaluation_started(approach=approach, total_test_cases=total_test_cases)

    def test_case_started(
        self, approach: str, test_case_id: str, test_case_name: str
    ) -> None:
        for obs in self._observers:
            obs.test_case_started(
                approach=approach,
                test_case_id=test_case_id,
                test_case_name=test_case_name,
            )

    def test_case_completed(
        self, approach: str, test_case_id: str, total_predictions: int
    ) -> None:
        for obs in self._observers:
            obs.test_case_completed(
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
        for obs in self._observers:
            obs.evaluation_completed(
                approach=approach,
                accuracy=accuracy,
                correct_predictions=correct_predictions,
                total_predictions=total_predictions,
                execution_time_seconds=execution_time_seconds,
            )

    def evaluation_failed(self, approach: str, reason: str) -> None:
        for obs in self._observers:
            obs.evaluation_failed(approach=approach, reason=reason)

    def dispose_failed(self, approach: str, reason: str) -> None:
        for obs in self._observers:
            obs.dispose_failed(approach=approach, reason=reason)
