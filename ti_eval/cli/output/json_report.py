"""JSON report serialization: per-approach metrics plus the cross-approach comparison."""

from collections.abc import Mapping
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from ti_eval.evaluation.domain.comparison import ResultComparison
from ti_eval.evaluation.domain.result import EvaluationResult
from ti_eval.evaluation.domain.scoring import ScoringPolicy

type JsonDict = dict[str, Any]

REPORT_SCHEMA_VERSION = "1"


def _ti_eval_version() -> str:
    try:
        return version("ti-eval")
    except PackageNotFoundError:
        return "dev"


def _result_json(result: EvaluationResult) -> JsonDict:
    return {
        "approach_name": result.approach_name,
        "accuracy": result.accuracy,
        "correct_predictions": result.correct_predictions,
        "total_predictions": result.total_predictions,
        "raw_predictions": len(result.predictions),
        "execution_time_seconds": result.execution_time_seconds,
        "precision_by_type": dict(result.precision_by_type),
        "recall_by_type": dict(result.recall_by_type),
        "f1_score_by_type": dict(result.f1_score_by_type),
        "additional_metrics": dict(result.additional_metrics),
    }


def build_report_json(
    config_name: str,
    config_version: str,
    scoring_policy: ScoringPolicy,
    results: Mapping[str, EvaluationResult],
    comparison: ResultComparison,
    generated_at: datetime,
) -> JsonDict:
    """Build the report document for one evaluation run.

    Pure: the caller supplies the timestamp, so the output depends only on
    its arguments. Results keep the mapping's order.
    """
    return {
        "schema_version": REPORT_SCHEMA_VERSION,
        "generated_at": generated_at.isoformat(),
        "tool": {"name": "ti-eval", "version": _ti_eval_version()},
        "config": {
            "name": config_name,
            "version": config_version,
            "scoring_policy": str(scoring_policy),
        },
        "comparison": comparison.model_dump(mode="json"),
        "results": [_result_json(result) for result in results.values()],
    }
