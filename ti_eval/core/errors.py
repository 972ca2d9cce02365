"""Base exception class for all ti-eval-specific errors."""


class TiEvalError(Exception):
    """Base class for all ti-eval errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
