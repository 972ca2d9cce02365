"""Top-level EvalConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from ti_eval.config.domain.approach import ApproachConfig
from ti_eval.config.domain.scoring import ScoringConfig
from ti_eval.config.domain.test_cases import TestCaseSourceConfig

type ApproachName = str


class EvalConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a ti-eval evaluation run.

    ``approaches`` preserves YAML order, which is the order approaches are
    registered and evaluated in.
    """

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    test_cases: TestCaseSourceConfig = Field(default_factory=TestCaseSourceConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    approaches: dict[ApproachName, ApproachConfig] = Field(min_length=1)
