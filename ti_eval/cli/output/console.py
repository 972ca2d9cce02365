"""Console rendering of evaluation results with ANSI styling via typer.echo."""

from collections.abc import Mapping
from pathlib import Path

import typer

from ti_eval.approach.domain.prediction import TypePrediction
from ti_eval.evaluation.domain.comparison import ResultComparison
from ti_eval.evaluation.domain.result import EvaluationResult
from ti_eval.testcase.domain.test_case import TestCase

# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_BLUE = "\033[34m"
_WHITE = "\033[97m"

_BAR_WIDTH = 10


def _ratio_color(value: float) -> str:
    if value >= 0.75:
        return _GREEN
    if value >= 0.4:
        return _YELLOW
    return _RED


def _rule(width: int = 72, color: str = _DIM) -> None:
    typer.echo(f"{color}{'─' * width}{_RESET}")


def _percent(value: float) -> str:
    return f"{value * 100:.2f}%"


def _bar(value: float) -> str:
    filled = round(value * _BAR_WIDTH)
    color = _ratio_color(value)
    return f"{color}{'█' * filled}{_DIM}{'░' * (_BAR_WIDTH - filled)}{_RESET}"


def print_test_cases(test_cases: list[TestCase]) -> None:
    """List loaded test cases with their difficulty."""
    typer.echo(f"\n{_BOLD}Loaded {len(test_cases)} test cases:{_RESET}")
    for test_case in test_cases:
        difficulty = test_case.metadata.difficulty if test_case.metadata else "unknown"
        typer.echo(f"  {_DIM}-{_RESET} {test_case.name} {_DIM}({difficulty}){_RESET}")


def print_comparison(comparison: ResultComparison, failed: list[str]) -> None:
    """Print the headline summary and the ranked per-approach table."""
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  Type Inference Evaluation Results{_RESET}")
    _rule(color=_CYAN)
    typer.echo("")

    summary = comparison.summary
    if summary.best_accuracy is None or summary.fastest_execution is None:
        typer.echo(f"  {_YELLOW}No approach produced a result.{_RESET}")
    else:
        meta_rows: list[tuple[str, str]] = [
            (
                "Best accuracy",
                f"{summary.best_accuracy.approach} "
                f"({_percent(summary.best_accuracy.score)})",
            ),
            (
                "Fastest",
                f"{summary.fastest_execution.approach} "
                f"({summary.fastest_execution.time_seconds * 1000:.2f}ms)",
            ),
            ("Scored predictions", str(summary.total_test_cases)),
        ]
        label_w = max(len(label) for label, _ in meta_rows)
        for label, value in meta_rows:
            typer.echo(f"  {_DIM}{label:<{label_w}}{_RESET}  {_WHITE}{value}{_RESET}")

    if comparison.detailed_comparison:
        name_w = max(len(row.approach) for row in comparison.detailed_comparison)
        name_w = max(name_w, len("Approach"))
        typer.echo("")
        typer.echo(
            f"  {_DIM}{'Approach':<{name_w}}  {'Accuracy':>8}  "
            f"{'Correct':>9}  {'Time':>10}  Bar{_RESET}"
        )
        typer.echo(f"  {'─' * name_w}  {'─' * 8}  {'─' * 9}  {'─' * 10}  {'─' * _BAR_WIDTH}")
        for row in comparison.detailed_comparison:
            color = _ratio_color(row.accuracy)
            correct = f"{row.correct_predictions}/{row.total_predictions}"
            elapsed = f"{row.execution_time_seconds * 1000:.2f}ms"
            typer.echo(
                f"  {_WHITE}{row.approach:<{name_w}}{_RESET}"
                f"  {color}{_percent(row.accuracy):>8}{_RESET}"
                f"  {correct:>9}"
                f"  {_DIM}{elapsed:>10}{_RESET}"
                f"  {_bar(row.accuracy)}"
            )

    if failed:
        typer.echo("")
        typer.echo(f"  {_RED}{_BOLD}Failed approaches:{_RESET} {', '.join(failed)}")


def print_type_metrics(result: EvaluationResult) -> None:
    """Print precision, recall and F1 per type label for one result."""
    typer.echo("")
    _rule(color=_BLUE)
    typer.echo(f"{_BLUE}{_BOLD}  {result.approach_name}{_RESET}")
    _rule(color=_BLUE)
    typer.echo(
        f"  {_DIM}Correct {result.correct_predictions}/{result.total_predictions}"
        f"  ·  accuracy {_percent(result.accuracy)}{_RESET}"
    )

    labels = list(dict.fromkeys([*result.precision_by_type, *result.recall_by_type]))
    if not labels:
        typer.echo(f"  {_YELLOW}No scored predictions.{_RESET}")
        return

    label_w = max(max(len(label) for label in labels), len("Type"))
    typer.echo("")
    typer.echo(
        f"  {_DIM}{'Type':<{label_w}}  {'Precision':>9}  {'Recall':>8}  {'F1':>8}{_RESET}"
    )
    typer.echo(f"  {'─' * label_w}  {'─' * 9}  {'─' * 8}  {'─' * 8}")
    for label in labels:
        precision = result.precision_by_type.get(label, 0.0)
        recall = result.recall_by_type.get(label, 0.0)
        f1 = result.f1_score_by_type.get(label, 0.0)
        typer.echo(
            f"  {_WHITE}{label:<{label_w}}{_RESET}"
            f"  {_ratio_color(precision)}{_percent(precision):>9}{_RESET}"
            f"  {_ratio_color(recall)}{_percent(recall):>8}{_RESET}"
            f"  {_ratio_color(f1)}{_percent(f1):>8}{_RESET}"
        )

    if result.additional_metrics:
        typer.echo("")
        for key, value in result.additional_metrics.items():
            typer.echo(f"  {_DIM}{key}: {value:g}{_RESET}")


def print_predictions(predictions: list[TypePrediction], limit: int = 5) -> None:
    """Print the first ``limit`` predictions with their context."""
    typer.echo("")
    typer.echo(f"{_BOLD}Sample predictions (first {limit}):{_RESET}")
    for prediction in predictions[:limit]:
        position = f"{prediction.position.line}:{prediction.position.column}"
        typer.echo(
            f"  {_CYAN}{prediction.identifier}{_RESET}"
            f" {_DIM}@{position}{_RESET} → {_WHITE}{prediction.predicted_type}{_RESET}"
        )
        context = prediction.context
        typer.echo(
            f"    {_DIM}scope={context.scope}"
            f"  context={context.syntactic_context}"
            f"  hints={', '.join(context.semantic_hints) or '-'}{_RESET}"
        )
    if not predictions:
        typer.echo(f"  {_DIM}(none){_RESET}")


def print_report_location(path: Path) -> None:
    typer.echo("")
    typer.echo(f"  {_DIM}Report{_RESET}  {_WHITE}{path}{_RESET}")
    typer.echo("")


def print_all_type_metrics(results: Mapping[str, EvaluationResult]) -> None:
    for result in results.values():
        print_type_metrics(result)
