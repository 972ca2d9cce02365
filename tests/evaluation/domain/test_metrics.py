"""Tests for the metrics engine."""

import pytest

from ti_eval.evaluation.domain.match import match_predictions
from ti_eval.evaluation.domain.metrics import (
    COVERAGE,
    UNMATCHED_GROUND_TRUTH,
    UNMATCHED_PREDICTIONS,
    calculate_accuracy,
    calculate_f1_score_by_type,
    calculate_precision_by_type,
    calculate_recall_by_type,
    generate_evaluation_result,
)
from ti_eval.evaluation.domain.scoring import ScoringPolicy
from tests.evaluation.builders import prediction, truth


class TestSingleCorrectPrediction:
    """One ground truth, one matching correct prediction."""

    def test_all_metrics_are_perfect(self) -> None:
        result = generate_evaluation_result(
            approach_name="A",
            predictions=[prediction("count", "number", 1, 7)],
            ground_truth=[truth("count", "number", 1, 7)],
            execution_time_seconds=0.01,
        )
        assert result.accuracy == 1.0
        assert result.correct_predictions == 1
        assert result.total_predictions == 1
        assert result.precision_by_type == {"number": 1.0}
        assert result.recall_by_type == {"number": 1.0}
        assert result.f1_score_by_type == {"number": 1.0}
        assert result.execution_time_seconds == 0.01


class TestWrongPrediction:
    """A matched but wrong prediction counts against both labels."""

    def test_precision_and_recall_are_zero(self) -> None:
        result = generate_evaluation_result(
            approach_name="A",
            predictions=[prediction("count", "string", 1, 7)],
            ground_truth=[truth("count", "number", 1, 7)],
            execution_time_seconds=0.0,
        )
        assert result.accuracy == 0.0
        assert result.correct_predictions == 0
        assert result.total_predictions == 1
        assert result.precision_by_type == {"string": 0.0}
        assert result.recall_by_type == {"number": 0.0}
        assert result.f1_score_by_type == {"string": 0.0, "number": 0.0}


class TestEmptyInputs:
    def test_no_predictions_and_no_ground_truth(self) -> None:
        result = generate_evaluation_result(
            approach_name="A", predictions=[], ground_truth=[], execution_time_seconds=0.0
        )
        assert result.accuracy == 0.0
        assert result.total_predictions == 0
        assert result.precision_by_type == {}
        assert result.recall_by_type == {}
        assert result.f1_score_by_type == {}
        assert result.additional_metrics[COVERAGE] == 0.0

    def test_unmatched_predictions_only(self) -> None:
        result = generate_evaluation_result(
            approach_name="A",
            predictions=[prediction("x", "number", 5, 5)],
            ground_truth=[],
            execution_time_seconds=0.0,
        )
        assert result.accuracy == 0.0
        assert result.total_predictions == 0
        assert result.precision_by_type == {}
        assert result.additional_metrics[UNMATCHED_PREDICTIONS] == 1.0

    def test_ground_truth_without_predictions_has_zero_recall(self) -> None:
        result = generate_evaluation_result(
            approach_name="A",
            predictions=[],
            ground_truth=[truth("x", "number", 1, 0)],
            execution_time_seconds=0.0,
        )
        assert result.recall_by_type == {"number": 0.0}
        assert result.additional_metrics[UNMATCHED_GROUND_TRUTH] == 1.0


class TestPerTypeMetrics:
    def _match_set(self):
        predictions = [
            prediction("a", "number", 1, 0),
            prediction("b", "number", 2, 0),
            prediction("c", "string", 3, 0),
        ]
        ground_truth = [
            truth("a", "number", 1, 0),
            truth("b", "string", 2, 0),
            truth("c", "string", 3, 0),
            truth("d", "string", 4, 0),
        ]
        return match_predictions(predictions, ground_truth), ground_truth

    def test_precision_by_predicted_label(self) -> None:
        match_set, _ = self._match_set()
        assert calculate_precision_by_type(match_set) == {"number": 0.5, "string": 1.0}

    def test_recall_uses_full_ground_truth_population(self) -> None:
        match_set, ground_truth = self._match_set()
        recall = calculate_recall_by_type(match_set, ground_truth)
        assert recall["number"] == 1.0
        assert recall["string"] == pytest.approx(1 / 3)

    def test_f1_is_harmonic_not_arithmetic_mean(self) -> None:
        f1 = calculate_f1_score_by_type({"string": 1.0}, {"string": 1 / 3})
        assert f1["string"] == pytest.approx(0.5)
        assert f1["string"] != pytest.approx((1.0 + 1 / 3) / 2)

    def test_f1_covers_labels_from_either_map(self) -> None:
        f1 = calculate_f1_score_by_type({"number": 0.5}, {"string": 0.5})
        assert f1 == {"number": 0.0, "string": 0.0}

    def test_accuracy_over_matched_predictions(self) -> None:
        match_set, _ = self._match_set()
        assert calculate_accuracy(match_set) == pytest.approx(2 / 3)

    def test_coverage_is_matched_share_of_ground_truth(self) -> None:
        match_set, ground_truth = self._match_set()
        result = generate_evaluation_result(
            approach_name="A",
            predictions=[m.prediction for m in match_set.matches],
            ground_truth=ground_truth,
            execution_time_seconds=0.0,
        )
        assert result.additional_metrics[COVERAGE] == 0.75


class TestStrictPolicy:
    """Under the strict policy unmatched predictions count as wrong."""

    def _predictions_and_truth(self):
        return (
            [prediction("a", "number", 1, 0), prediction("ghost", "number", 9, 9)],
            [truth("a", "number", 1, 0)],
        )

    def test_lenient_ignores_unmatched_predictions(self) -> None:
        predictions, ground_truth = self._predictions_and_truth()
        result = generate_evaluation_result(
            approach_name="A",
            predictions=predictions,
            ground_truth=ground_truth,
            execution_time_seconds=0.0,
            policy=ScoringPolicy.LENIENT,
        )
        assert result.accuracy == 1.0
        assert result.total_predictions == 1
        assert result.precision_by_type == {"number": 1.0}

    def test_strict_penalises_unmatched_predictions(self) -> None:
        predictions, ground_truth = self._predictions_and_truth()
        result = generate_evaluation_result(
            approach_name="A",
            predictions=predictions,
            ground_truth=ground_truth,
            execution_time_seconds=0.0,
            policy=ScoringPolicy.STRICT,
        )
        assert result.accuracy == 0.5
        assert result.total_predictions == 2
        assert result.precision_by_type == {"number": 0.5}
        assert result.recall_by_type == {"number": 1.0}

    def test_raw_predictions_are_kept_under_both_policies(self) -> None:
        predictions, ground_truth = self._predictions_and_truth()
        for policy in ScoringPolicy:
            result = generate_evaluation_result(
                approach_name="A",
                predictions=predictions,
                ground_truth=ground_truth,
                execution_time_seconds=0.0,
                policy=policy,
            )
            assert result.predictions == predictions
