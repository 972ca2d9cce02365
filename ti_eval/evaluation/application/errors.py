"""Error types raised by the evaluation application layer."""

from ti_eval.core.errors import TiEvalError


class ApproachNotRegisteredError(TiEvalError):
    """Raised when evaluating an approach name that was never registered."""

    def __init__(self, approach: str) -> None:
        self.approach = approach
        super().__init__(f"Failed to evaluate approach: '{approach}' is not registered")


class ApproachDisposeError(TiEvalError):
    """Raised when dispose fails after an otherwise successful evaluation."""

    def __init__(self, approach: str, reason: str) -> None:
        self.approach = approach
        super().__init__(f"Failed to dispose approach '{approach}': {reason}")
