"""FakeApproachObserver — records approach domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ApproachInitializedEvent:
    approach: str
    options: dict[str, object]


@dataclass(frozen=True)
class SyntaxErrorsDetectedEvent:
    approach: str
    file_path: str
    error_count: int


@dataclass(frozen=True)
class TraversalFailedEvent:
    approach: str
    file_path: str
    reason: str
    collected: int


@dataclass(frozen=True)
class PredictionsCompletedEvent:
    approach: str
    file_path: str
    candidates: int
    emitted: int


class FakeApproachObserver:
    """Records all emitted approach events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self._initialized: list[ApproachInitializedEvent] = []
        self._syntax_errors: list[SyntaxErrorsDetectedEvent] = []
        self._traversal_failures: list[TraversalFailedEvent] = []
        self._completed: list[PredictionsCompletedEvent] = []

    @property
    def initialized(self) -> list[ApproachInitializedEvent]:
        return self._initialized

    @property
    def syntax_errors(self) -> list[SyntaxErrorsDetectedEvent]:
        return self._syntax_errors

    @property
    def traversal_failures(self) -> list[TraversalFailedEvent]:
        return self._traversal_failures

    @property
    def completed(self) -> list[PredictionsCompletedEvent]:
        return self._completed

    def approach_initialized(self, approach: str, options: dict[str, object]) -> None:
        self._initialized.append(
            ApproachInitializedEvent(approach=approach, options=options)
        )

    def syntax_errors_detected(
        self, approach: str, file_path: str, error_count: int
    ) -> None:
        self._syntax_errors.append(
            SyntaxErrorsDetectedEvent(
                approach=approach, file_path=file_path, error_count=error_count
            )
        )

    def traversal_failed(
        self, approach: str, file_path: str, reason: str, collected: int
    ) -> None:
        self._traversal_failures.append(
            TraversalFailedEvent(
                approach=approach,
                file_path=file_path,
                reason=reason,
                collected=collected,
            )
        )

    def predictions_completed(
        self, approach: str, file_path: str, candidates: int, emitted: int
    ) -> None:
        self._completed.append(
            PredictionsCompletedEvent(
                approach=approach,
                file_path=file_path,
                candidates=candidates,
                emitted=emitted,
            )
        )
