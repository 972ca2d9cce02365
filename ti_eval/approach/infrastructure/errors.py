"""Error types raised by approach infrastructure."""

from ti_eval.core.errors import TiEvalError


class ApproachTypeNotSupportedError(TiEvalError):
    """Raised when an ApproachConfig.type has no registered implementation."""

    def __init__(self, approach_type: str) -> None:
        self.approach_type = approach_type
        super().__init__(
            f"Failed to create approach: unsupported approach type: {approach_type!r}"
        )


class ApproachConfigurationError(TiEvalError):
    """Raised when a recognised approach option has an invalid value."""

    def __init__(self, approach: str, option: str, reason: str) -> None:
        self.option = option
        super().__init__(
            f"Failed to configure approach '{approach}': option '{option}' {reason}"
        )
