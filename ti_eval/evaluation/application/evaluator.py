"""TypeInferenceEvaluator — runs registered approaches over test cases and scores them."""

import time
from collections.abc import Mapping

from ti_eval.approach.domain.approach import Approach, ApproachOptions
from ti_eval.approach.domain.prediction import TypePrediction
from ti_eval.evaluation.application.errors import (
    ApproachDisposeError,
    ApproachNotRegisteredError,
)
from ti_eval.evaluation.domain.comparison import (
    ApproachComparison,
    ApproachScore,
    ApproachTiming,
    ComparisonSummary,
    ResultComparison,
)
from ti_eval.evaluation.domain.match import MatchSet, match_predictions
from ti_eval.evaluation.domain.metrics import build_evaluation_result
from ti_eval.evaluation.domain.observer import EvaluationObserver
from ti_eval.evaluation.domain.result import EvaluationResult
from ti_eval.evaluation.domain.scoring import ScoringPolicy
from ti_eval.testcase.domain.test_case import GroundTruthType, TestCase


class TypeInferenceEvaluator:
    """Holds a registry of approaches and evaluates them one at a time.

    The evaluator never reads files or builds approaches itself: callers
    register ready-made Approach instances and pass in loaded TestCases, so
    fakes can stand in for both in tests.
    """

    def __init__(
        self,
        observer: EvaluationObserver,
        scoring_policy: ScoringPolicy = ScoringPolicy.LENIENT,
    ) -> None:
        self._observer = observer
        self._scoring_policy = scoring_policy
        self._approaches: dict[str, Approach] = {}

    @property
    def scoring_policy(self) -> ScoringPolicy:
        return self._scoring_policy

    def register_approach(self, approach: Approach) -> None:
        """Register approach under its name, replacing any earlier one in place."""
        replaced = approach.name in self._approaches
        self._approaches[approach.name] = approach
        self._observer.approach_registered(approach=approach.name, replaced=replaced)

    def registered_approaches(self) -> list[str]:
        return list(self._approaches)

    async def evaluate_approach(
        self,
        approach_name: str,
        test_cases: list[TestCase],
        config: ApproachOptions | None = None,
    ) -> EvaluationResult:
        """Initialize, run and dispose one approach, returning its scored result.

        Test cases are predicted sequentially and each is matched against its
        own ground truth. Only time spent inside ``predict`` is measured.

        Raises:
            ApproachNotRegisteredError: before any side effect, if approach_name
                is unknown.
            ApproachDisposeError: if dispose fails after a successful run.
            Exception: whatever initialize or predict raised; dispose is still
                attempted and its own failure is only reported.
        """
        approach = self._approaches.get(approach_name)
        if approach is None:
            raise ApproachNotRegisteredError(approach=approach_name)

        self._observer.evaluation_started(
            approach=approach_name, total_test_cases=len(test_cases)
        )

        try:
            await approach.initialize(dict(config or {}))
            result = await self._run(
                approach=approach, approach_name=approach_name, test_cases=test_cases
            )
        except Exception:
            await self._dispose_after_failure(approach=approach, approach_name=approach_name)
            raise

        try:
            await approach.dispose()
        except Exception as exc:  # noqa: BLE001
            raise ApproachDisposeError(approach=approach_name, reason=str(exc)) from exc

        self._observer.evaluation_completed(
            approach=approach_name,
            accuracy=result.accuracy,
            correct_predictions=result.correct_predictions,
            total_predictions=result.total_predictions,
            execution_time_seconds=result.execution_time_seconds,
        )
        return result

    async def evaluate_all_approaches(
        self,
        test_cases: list[TestCase],
        config_by_approach: Mapping[str, ApproachOptions] | None = None,
    ) -> dict[str, EvaluationResult]:
        """Evaluate every registered approach in registration order.

        A failing approach is reported through the observer and left out of
        the returned mapping; the remaining approaches still run.
        """
        configs = config_by_approach or {}
        results: dict[str, EvaluationResult] = {}

        for approach_name in list(self._approaches):
            try:
                results[approach_name] = await self.evaluate_approach(
                    approach_name=approach_name,
                    test_cases=test_cases,
                    config=configs.get(approach_name),
                )
            except Exception as exc:  # noqa: BLE001
                self._observer.evaluation_failed(approach=approach_name, reason=str(exc))

        return results

    def compare_results(self, results: Mapping[str, EvaluationResult]) -> ResultComparison:
        """Summarise results: best accuracy, fastest run, and a ranked table.

        Ties for best and fastest go to the earliest entry in mapping order.
        ``total_test_cases`` reports the scored prediction count of the first
        result, or 0 when there are none.
        """
        rows = [
            ApproachComparison(
                approach=approach_name,
                accuracy=result.accuracy,
                execution_time_seconds=result.execution_time_seconds,
                correct_predictions=result.correct_predictions,
                total_predictions=result.total_predictions,
            )
            for approach_name, result in results.items()
        ]

        best: ApproachComparison | None = None
        fastest: ApproachComparison | None = None
        for row in rows:
            if best is None or row.accuracy > best.accuracy:
                best = row
            if fastest is None or row.execution_time_seconds < fastest.execution_time_seconds:
                fastest = row

        return ResultComparison(
            summary=ComparisonSummary(
                best_accuracy=(
                    ApproachScore(approach=best.approach, score=best.accuracy)
                    if best is not None
                    else None
                ),
                fastest_execution=(
                    ApproachTiming(
                        approach=fastest.approach,
                        time_seconds=fastest.execution_time_seconds,
                    )
                    if fastest is not None
                    else None
                ),
                total_test_cases=rows[0].total_predictions if rows else 0,
            ),
            detailed_comparison=sorted(rows, key=lambda row: row.accuracy, reverse=True),
        )

    async def _run(
        self, approach: Approach, approach_name: str, test_cases: list[TestCase]
    ) -> EvaluationResult:
        predictions: list[TypePrediction] = []
        ground_truth: list[GroundTruthType] = []
        match_set = MatchSet()
        elapsed = 0.0

        for test_case in test_cases:
            self._observer.test_case_started(
                approach=approach_name,
                test_case_id=test_case.id,
                test_case_name=test_case.name,
            )
            started_at = time.perf_counter()
            case_predictions = await approach.predict(
                source_code=test_case.source_code, file_path=test_case.id
            )
            elapsed += time.perf_counter() - started_at

            predictions.extend(case_predictions)
            ground_truth.extend(test_case.ground_truth)
            match_set = match_set.merge(
                match_predictions(case_predictions, test_case.ground_truth)
            )
            self._observer.test_case_completed(
                approach=approach_name,
                test_case_id=test_case.id,
                total_predictions=len(case_predictions),
            )

        return build_evaluation_result(
            approach_name=approach_name,
            predictions=predictions,
            match_set=match_set,
            ground_truth=ground_truth,
            execution_time_seconds=elapsed,
            policy=self._scoring_policy,
        )

    async def _dispose_after_failure(self, approach: Approach, approach_name: str) -> None:
        try:
            await approach.dispose()
        except Exception as exc:  # noqa: BLE001
            self._observer.dispose_failed(approach=approach_name, reason=str(exc))
