"""Metrics engine: accuracy and per-type precision, recall and F1 over matches.

Every ratio with an empty denominator resolves to 0.0.
"""

from collections import Counter

from ti_eval.approach.domain.prediction import TypePrediction
from ti_eval.evaluation.domain.match import MatchSet, match_predictions
from ti_eval.evaluation.domain.result import EvaluationResult, TypeLabel
from ti_eval.evaluation.domain.scoring import ScoringPolicy
from ti_eval.testcase.domain.test_case import GroundTruthType

UNMATCHED_PREDICTIONS = "unmatched_predictions"
UNMATCHED_GROUND_TRUTH = "unmatched_ground_truth"
COVERAGE = "coverage"


def _ratio(numerator: int, denominator: int) -> float:
    return numerator / denominator if denominator else 0.0


def scored_prediction_count(
    match_set: MatchSet, policy: ScoringPolicy = ScoringPolicy.LENIENT
) -> int:
    """Number of predictions that count toward accuracy under policy."""
    if policy is ScoringPolicy.STRICT:
        return len(match_set.matches) + len(match_set.unmatched_predictions)
    return len(match_set.matches)


def calculate_accuracy(
    match_set: MatchSet, policy: ScoringPolicy = ScoringPolicy.LENIENT
) -> float:
    """Correct matches divided by scored predictions."""
    return _ratio(match_set.correct_count, scored_prediction_count(match_set, policy))


def calculate_precision_by_type(
    match_set: MatchSet, policy: ScoringPolicy = ScoringPolicy.LENIENT
) -> dict[TypeLabel, float]:
    """For each predicted label, the share of its predictions that were correct."""
    correct: Counter[str] = Counter()
    total: Counter[str] = Counter()
    for match in match_set.matches:
        total[match.predicted_type] += 1
        if match.correct:
            correct[match.predicted_type] += 1
    if policy is ScoringPolicy.STRICT:
        for prediction in match_set.unmatched_predictions:
            total[prediction.predicted_type] += 1

    return {label: _ratio(correct[label], count) for label, count in total.items()}


def calculate_recall_by_type(
    match_set: MatchSet, ground_truth: list[GroundTruthType]
) -> dict[TypeLabel, float]:
    """For each actual label, the share of its ground-truth entries predicted correctly.

    The denominator is the whole ground-truth population of the label,
    including entries no prediction was made for.
    """
    population = Counter(truth.actual_type for truth in ground_truth)
    correct = Counter(match.actual_type for match in match_set.matches if match.correct)
    return {label: _ratio(correct[label], count) for label, count in population.items()}


def calculate_f1_score_by_type(
    precision_by_type: dict[TypeLabel, float], recall_by_type: dict[TypeLabel, float]
) -> dict[TypeLabel, float]:
    """Harmonic mean of precision and recall for every label seen in either map."""
    labels = dict.fromkeys([*precision_by_type, *recall_by_type])
    f1_by_type: dict[TypeLabel, float] = {}
    for label in labels:
        precision = precision_by_type.get(label, 0.0)
        recall = recall_by_type.get(label, 0.0)
        if precision + recall == 0:
            f1_by_type[label] = 0.0
        else:
            f1_by_type[label] = 2 * precision * recall / (precision + recall)
    return f1_by_type


def build_evaluation_result(
    approach_name: str,
    predictions: list[TypePrediction],
    match_set: MatchSet,
    ground_truth: list[GroundTruthType],
    execution_time_seconds: float,
    policy: ScoringPolicy = ScoringPolicy.LENIENT,
) -> EvaluationResult:
    """Score an already-matched prediction set.

    Used by the evaluator, which matches each test case separately and merges
    the per-case MatchSets before scoring.
    """
    precision_by_type = calculate_precision_by_type(match_set, policy)
    recall_by_type = calculate_recall_by_type(match_set, ground_truth)
    matched_ground_truth = len(ground_truth) - len(match_set.unmatched_ground_truth)

    return EvaluationResult(
        approach_name=approach_name,
        predictions=predictions,
        accuracy=calculate_accuracy(match_set, policy),
        precision_by_type=precision_by_type,
        recall_by_type=recall_by_type,
        f1_score_by_type=calculate_f1_score_by_type(precision_by_type, recall_by_type),
        total_predictions=scored_prediction_count(match_set, policy),
        correct_predictions=match_set.correct_count,
        execution_time_seconds=execution_time_seconds,
        additional_metrics={
            UNMATCHED_PREDICTIONS: float(len(match_set.unmatched_predictions)),
            UNMATCHED_GROUND_TRUTH: float(len(match_set.unmatched_ground_truth)),
            COVERAGE: _ratio(matched_ground_truth, len(ground_truth)),
        },
    )


def generate_evaluation_result(
    approach_name: str,
    predictions: list[TypePrediction],
    ground_truth: list[GroundTruthType],
    execution_time_seconds: float,
    policy: ScoringPolicy = ScoringPolicy.LENIENT,
) -> EvaluationResult:
    """Match predictions against one source unit's ground truth and score them."""
    return build_evaluation_result(
        approach_name=approach_name,
        predictions=predictions,
        match_set=match_predictions(predictions, ground_truth),
        ground_truth=ground_truth,
        execution_time_seconds=execution_time_seconds,
        policy=policy,
    )
