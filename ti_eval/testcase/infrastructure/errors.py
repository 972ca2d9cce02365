"""Error types raised by test-case infrastructure."""

from ti_eval.core.errors import TiEvalError


class TestCaseLoadError(TiEvalError):
    """Raised when test cases cannot be loaded or are malformed."""

    __test__ = False

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load test cases: {reason}")
