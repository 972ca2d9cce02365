"""EvaluationResult — scored outcome of one approach over one set of test cases."""

from pydantic import BaseModel, Field

from ti_eval.approach.domain.prediction import TypePrediction

type TypeLabel = str


class EvaluationResult(BaseModel, frozen=True):
    """Immutable metrics record for one (approach, test-case set) evaluation.

    ``total_predictions`` counts scored predictions (matches, plus unmatched
    predictions under the strict policy), not every raw prediction.
    ``execution_time_seconds`` covers the predict phase only.
    """

    approach_name: str = Field(min_length=1)
    predictions: list[TypePrediction]
    accuracy: float = Field(ge=0.0, le=1.0)
    precision_by_type: dict[TypeLabel, float]
    recall_by_type: dict[TypeLabel, float]
    f1_score_by_type: dict[TypeLabel, float]
    total_predictions: int = Field(ge=0)
    correct_predictions: int = Field(ge=0)
    execution_time_seconds: float = Field(ge=0.0)
    additional_metrics: dict[str, float] = Field(default_factory=dict)
