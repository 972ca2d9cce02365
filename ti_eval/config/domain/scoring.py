"""Scoring configuration model."""

from pydantic import BaseModel

from ti_eval.evaluation.domain.scoring import ScoringPolicy


class ScoringConfig(BaseModel, frozen=True):
    policy: ScoringPolicy = ScoringPolicy.LENIENT
