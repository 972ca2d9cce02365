"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, version: str) -> None:
        self._log.info("config.loaded", name=name, version=version)

    def config_unseeded_approach_warning(self, approach: str) -> None:
        self._log.warning(
            "config.unseeded_approach_warning",
            approach=approach,
            message="Random approach without a seed produces non-reproducible results",
        )
