"""Structlog implementation of the ApproachObserver port."""

import structlog


class StructlogApproachObserver:
    """Delegates approach domain events to structlog.

    Satisfies the ApproachObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def approach_initialized(self, approach: str, options: dict[str, object]) -> None:
        self._log.debug("approach.initialized", approach=approach, options=options)

    def syntax_errors_detected(
        self, approach: str, file_path: str, error_count: int
    ) -> None:
        self._log.warning(
            "approach.syntax_errors_detected",
            approach=approach,
            file_path=file_path,
            error_count=error_count,
        )

    def traversal_failed(
        self, approach: str, file_path: str, reason: str, collected: int
    ) -> None:
        self._log.error(
            "approach.traversal_failed",
            approach=approach,
            file_path=file_path,
            reason=reason,
            collected=collected,
        )

    def predictions_completed(
        self, approach: str, file_path: str, candidates: int, emitted: int
    ) -> None:
        self._log.debug(
            "approach.predictions_completed",
            approach=approach,
            file_path=file_path,
            candidates=candidates,
            emitted=emitted,
        )
