"""FakeEvaluationObserver — records evaluation domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ApproachRegisteredEvent:
    approach: str
    replaced: bool


@dataclass(frozen=True)
class EvaluationStartedEvent:
    approach: str
    total_test_cases: int


@dataclass(frozen=True)
class TestCaseStartedEvent:
    __test__ = False

    approach: str
    test_case_id: str
    test_case_name: str


@dataclass(frozen=True)
class TestCaseCompletedEvent:
    __test__ = False

    approach: str
    test_case_id: str
    total_predictions: int


@dataclass(frozen=True)
class EvaluationCompletedEvent:
    approach: str
    accuracy: float
    correct_predictions: int
    total_predictions: int
    execution_time_seconds: float


@dataclass(frozen=True)
class EvaluationFailedEvent:
    approach: str
    reason: str


@dataclass(frozen=True)
class DisposeFailedEvent:
    approach: str
    reason: str


class FakeEvaluationObserver:
    """Records all emitted evaluation events as typed frozen dataclasses.

    Use in tests to assert which events were emitted and with what data,
    without mocking or patching.

    Event lists use a leading underscore + public property pattern to avoid
    name collision between the list attributes and the Protocol method names.
    """

    def __init__(self) -> None:
        self._registered: list[ApproachRegisteredEvent] = []
        self._started: list[EvaluationStartedEvent] = []
        self._test_cases_started: list[TestCaseStartedEvent] = []
        self._test_cases_completed: list[TestCaseCompletedEvent] = []
        self._completed: list[EvaluationCompletedEvent] = []
        self._failed: list[EvaluationFailedEvent] = []
        self._dispose_failed: list[DisposeFailedEvent] = []

    @property
    def registered(self) -> list[ApproachRegisteredEvent]:
        return self._registered

    @property
    def started(self) -> list[EvaluationStartedEvent]:
        return self._started

    @property
    def test_cases_started(self) -> list[TestCaseStartedEvent]:
        return self._test_cases_started

    @property
    def test_cases_completed(self) -> list[TestCaseCompletedEvent]:
        return self._test_cases_completed

    @property
    def completed(self) -> list[EvaluationCompletedEvent]:
        return self._completed

    @property
    def failed(self) -> list[EvaluationFailedEvent]:
        return self._failed

    @property
    def dispose_failures(self) -> list[DisposeFailedEvent]:
        return self._dispose_failed

    def approach_registered(self, approach: str, replaced: bool) -> None:
        self._registered.append(
            ApproachRegisteredEvent(approach=approach, replaced=replaced)
        )

    def evaluation_started(self, approach: str, total_test_cases: int) -> None:
        self._started.append(
            EvaluationStartedEvent(approach=approach, total_test_cases=total_test_cases)
        )

    def test_case_started(
        self, approach: str, test_case_id: str, test_case_name: str
    ) -> None:
        self._test_cases_started.append(
            TestCaseStartedEvent(
                approach=approach,
                test_case_id=test_case_id,
                test_case_name=test_case_name,
            )
        )

    def test_case_completed(
        self, approach: str, test_case_id: str, total_predictions: int
    ) -> None:
        self._test_cases_completed.append(
            TestCaseCompletedEvent(
                approach=approach,
                test_case_id=test_case_id,
                total_predictions=total_predictions,
            )
        )

    def evaluation_completed(
        self,
        approach: str,
        accuracy: float,
        correct_predictions: int,
        total_predictions: int,
        execution_time_seconds: float,
    ) -> None:
        self._completed.append(
            EvaluationCompletedEvent(
                approach=approach,
                accuracy=accuracy,
                correct_predictions=correct_predictions,
                total_predictions=total_predictions,
                execution_time_seconds=execution_time_seconds,
            )
        )

    def evaluation_failed(self, approach: str, reason: str) -> None:
        self._failed.append(EvaluationFailedEvent(approach=approach, reason=reason))

    def dispose_failed(self, approach: str, reason: str) -> None:
        self._dispose_failed.append(DisposeFailedEvent(approach=approach, reason=reason))
