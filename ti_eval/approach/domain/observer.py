"""ApproachObserver port — diagnostics emitted while approaches produce predictions."""

from typing import Protocol


class ApproachObserver(Protocol):
    """Observer port for approach domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def approach_initialized(self, approach: str, options: dict[str, object]) -> None: ...

    def syntax_errors_detected(
        self, approach: str, file_path: str, error_count: int
    ) -> None: ...

    def traversal_failed(
        self, approach: str, file_path: str, reason: str, collected: int
    ) -> None: ...

    def predictions_completed(
        self, approach: str, file_path: str, candidates: int, emitted: int
    ) -> None: ...
