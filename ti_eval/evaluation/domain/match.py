"""Matching of predictions to ground truth by identifier and exact position."""

from dataclasses import dataclass, field

from ti_eval.approach.domain.prediction import TypePrediction
from ti_eval.testcase.domain.test_case import GroundTruthType

type MatchKey = tuple[str, int, int]  # (identifier, line, column)


@dataclass(frozen=True)
class Match:
    """One prediction paired with the ground truth at the same identifier and position."""

    prediction: TypePrediction
    ground_truth: GroundTruthType

    @property
    def predicted_type(self) -> str:
        return self.prediction.predicted_type

    @property
    def actual_type(self) -> str:
        return self.ground_truth.actual_type

    @property
    def correct(self) -> bool:
        return self.predicted_type == self.actual_type


@dataclass(frozen=True)
class MatchSet:
    """Matches plus the predictions and ground truth that found no partner."""

    matches: list[Match] = field(default_factory=list)
    unmatched_predictions: list[TypePrediction] = field(default_factory=list)
    unmatched_ground_truth: list[GroundTruthType] = field(default_factory=list)

    @property
    def correct_count(self) -> int:
        return sum(1 for match in self.matches if match.correct)

    def merge(self, other: "MatchSet") -> "MatchSet":
        return MatchSet(
            matches=self.matches + other.matches,
            unmatched_predictions=self.unmatched_predictions
            + other.unmatched_predictions,
            unmatched_ground_truth=self.unmatched_ground_truth
            + other.unmatched_ground_truth,
        )


def _prediction_key(prediction: TypePrediction) -> MatchKey:
    return (prediction.identifier, prediction.position.line, prediction.position.column)


def _ground_truth_key(truth: GroundTruthType) -> MatchKey:
    return (truth.identifier, truth.position.line, truth.position.column)


def match_predictions(
    predictions: list[TypePrediction], ground_truth: list[GroundTruthType]
) -> MatchSet:
    """Pair each prediction with the first unclaimed ground truth sharing its key.

    Predictions are processed in order. A ground-truth entry is claimed by at
    most one prediction, so a repeated prediction for the same position is
    left unmatched. Call once per test case: positions are only unique
    within a single source unit.
    """
    available: dict[MatchKey, list[int]] = {}
    for index, truth in enumerate(ground_truth):
        available.setdefault(_ground_truth_key(truth), []).append(index)

    matches: list[Match] = []
    unmatched_predictions: list[TypePrediction] = []
    claimed: set[int] = set()

    for prediction in predictions:
        candidates = available.get(_prediction_key(prediction))
        if not candidates:
            unmatched_predictions.append(prediction)
            continue
        index = candidates.pop(0)
        claimed.add(index)
        matches.append(Match(prediction=prediction, ground_truth=ground_truth[index]))

    unmatched_ground_truth = [
        truth for index, truth in enumerate(ground_truth) if index not in claimed
    ]
    return MatchSet(
        matches=matches,
        unmatched_predictions=unmatched_predictions,
        unmatched_ground_truth=unmatched_ground_truth,
    )
