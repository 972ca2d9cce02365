"""Approach registry: maps ApproachConfig.type to the correct Approach implementation."""

from ti_eval.approach.domain.approach import Approach
from ti_eval.approach.domain.observer import ApproachObserver
from ti_eval.approach.infrastructure.errors import ApproachTypeNotSupportedError
from ti_eval.approach.infrastructure.random_approach import RandomTypeInferenceApproach
from ti_eval.config.domain.approach import ApproachConfig

RANDOM_TYPE = "random"


def create_approach(
    name: str, config: ApproachConfig, observer: ApproachObserver
) -> Approach:
    """Return a new Approach registered under name for the given ApproachConfig.

    Raises:
        ApproachTypeNotSupportedError: if config.type is not a known approach type.
    """
    if config.type == RANDOM_TYPE:
        return RandomTypeInferenceApproach(observer=observer, name=name)

    raise ApproachTypeNotSupportedError(approach_type=config.type)
