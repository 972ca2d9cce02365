"""Comparison models: structured summary across several EvaluationResults."""

from pydantic import BaseModel


class ApproachScore(BaseModel, frozen=True):
    approach: str
    score: float


class ApproachTiming(BaseModel, frozen=True):
    approach: str
    time_seconds: float


class ApproachComparison(BaseModel, frozen=True):
    """One row of the detailed comparison."""

    approach: str
    accuracy: float
    execution_time_seconds: float
    correct_predictions: int
    total_predictions: int


class ComparisonSummary(BaseModel, frozen=True):
    """Headline numbers; best/fastest are None when there are no results."""

    best_accuracy: ApproachScore | None
    fastest_execution: ApproachTiming | None
    total_test_cases: int


class ResultComparison(BaseModel, frozen=True):
    summary: ComparisonSummary
    detailed_comparison: list[ApproachComparison]
