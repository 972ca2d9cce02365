"""CLI entrypoint for ti-eval — typer app with `run` and `demo` commands."""

import asyncio
import json
import sys
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path

import structlog
import typer

from ti_eval.approach.domain.approach import ApproachOptions
from ti_eval.approach.infrastructure.observer import StructlogApproachObserver
from ti_eval.approach.infrastructure.random_approach import (
    AVAILABLE_TYPES_OPTION,
    PROBABILITY_OPTION,
    SEED_OPTION,
    RandomTypeInferenceApproach,
)
from ti_eval.approach.infrastructure.registry import create_approach
from ti_eval.cli.output.console import (
    print_all_type_metrics,
    print_comparison,
    print_predictions,
    print_report_location,
    print_test_cases,
)
from ti_eval.cli.output.json_report import build_report_json
from ti_eval.config.domain.config import EvalConfig
from ti_eval.config.domain.test_cases import TestCaseSourceConfig
from ti_eval.config.infrastructure.observer import StructlogConfigObserver
from ti_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from ti_eval.core.errors import TiEvalError
from ti_eval.evaluation.application.evaluator import TypeInferenceEvaluator
from ti_eval.evaluation.domain.observer import EvaluationObserver
from ti_eval.evaluation.domain.result import EvaluationResult
from ti_eval.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from ti_eval.evaluation.infrastructure.observer import StructlogEvaluationObserver
from ti_eval.evaluation.infrastructure.progress_observer import (
    ProgressEvaluationObserver,
)
from ti_eval.testcase.domain.test_case import TestCase
from ti_eval.testcase.infrastructure.factory import create_test_case_loader
from ti_eval.testcase.infrastructure.observer import StructlogTestCaseObserver
from ti_eval.testcase.infrastructure.samples import SampleTestCaseLoader

app = typer.Typer(add_completion=False)

DEMO_OPTIONS: dict[str, object] = {
    AVAILABLE_TYPES_OPTION: ["boolean", "string", "number", "object", "array", "function"],
    PROBABILITY_OPTION: 1.0,
}


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def _output_path(output_dir: Path, config_name: str, generated_at: datetime) -> Path:
    """Build the report path: {config_name}_{YYYYMMDD}.json."""
    return output_dir / f"{config_name}_{generated_at.strftime('%Y%m%d')}.json"


def _build_observer(log_format: str) -> tuple[EvaluationObserver, ProgressEvaluationObserver]:
    progress = ProgressEvaluationObserver(disabled=log_format == "json")
    observer = CompositeEvaluationObserver(
        observers=[StructlogEvaluationObserver(), progress]
    )
    return observer, progress


async def _evaluate(
    evaluator: TypeInferenceEvaluator,
    test_cases: list[TestCase],
    config_by_approach: Mapping[str, ApproachOptions],
) -> dict[str, EvaluationResult]:
    return await evaluator.evaluate_all_approaches(
        test_cases=test_cases, config_by_approach=config_by_approach
    )


def _run_evaluation(
    config: EvalConfig, log_format: str
) -> tuple[TypeInferenceEvaluator, dict[str, EvaluationResult], list[str]]:
    """Build approaches from config, evaluate them all, and return the results.

    Returns the evaluator, the results mapping, and the names that failed.
    """
    test_case_loader = create_test_case_loader(
        config=config.test_cases, observer=StructlogTestCaseObserver()
    )
    test_cases = test_case_loader.load(config=config.test_cases)

    observer, progress = _build_observer(log_format=log_format)
    evaluator = TypeInferenceEvaluator(
        observer=observer, scoring_policy=config.scoring.policy
    )
    approach_observer = StructlogApproachObserver()
    for name, approach_config in config.approaches.items():
        evaluator.register_approach(
            create_approach(name=name, config=approach_config, observer=approach_observer)
        )

    try:
        results = asyncio.run(
            _evaluate(
                evaluator=evaluator,
                test_cases=test_cases,
                config_by_approach={
                    name: approach_config.options
                    for name, approach_config in config.approaches.items()
                },
            )
        )
    finally:
        progress.stop()

    failed = [name for name in evaluator.registered_approaches() if name not in results]
    return evaluator, results, failed


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to evaluation config YAML"),
    output_dir: Path = typer.Option(
        Path("./results"),
        "--output-dir",
        "-o",
        help="Directory for the JSON report",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Evaluate the approaches described by a YAML config file."""
    try:
        _configure_structlog(log_format=log_format)

        loader = YamlConfigLoader(observer=StructlogConfigObserver())
        try:
            config = loader.load(path=config_path)
        except TiEvalError as exc:
            typer.echo(str(exc))
            raise typer.Exit(code=1) from exc

        output_dir.mkdir(parents=True, exist_ok=True)

        evaluator, results, failed = _run_evaluation(config=config, log_format=log_format)
        comparison = evaluator.compare_results(results)

        generated_at = datetime.now()
        report = build_report_json(
            config_name=config.name,
            config_version=config.version,
            scoring_policy=evaluator.scoring_policy,
            results=results,
            comparison=comparison,
            generated_at=generated_at,
        )
        report_path = _output_path(
            output_dir=output_dir, config_name=config.name, generated_at=generated_at
        )
        report_path.write_text(json.dumps(report, indent=2), encoding="utf-8")

        print_comparison(comparison=comparison, failed=failed)
        print_all_type_metrics(results)
        print_report_location(path=report_path)

        if not results:
            raise typer.Exit(code=1)

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo("Evaluation interrupted.")
        sys.exit(1)
    except TiEvalError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


@app.command()
def demo(
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for the random baseline (omit for a fresh run)"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Evaluate the random baseline on the built-in sample test cases."""
    try:
        _configure_structlog(log_format=log_format)

        test_cases = SampleTestCaseLoader(observer=StructlogTestCaseObserver()).load(
            config=TestCaseSourceConfig()
        )
        print_test_cases(test_cases)

        observer, progress = _build_observer(log_format=log_format)
        evaluator = TypeInferenceEvaluator(observer=observer)
        approach = RandomTypeInferenceApproach(observer=StructlogApproachObserver())
        evaluator.register_approach(approach)

        options = {**DEMO_OPTIONS, SEED_OPTION: seed}
        try:
            results = asyncio.run(
                _evaluate(
                    evaluator=evaluator,
                    test_cases=test_cases,
                    config_by_approach={approach.name: options},
                )
            )
        finally:
            progress.stop()

        failed = [name for name in evaluator.registered_approaches() if name not in results]
        print_comparison(comparison=evaluator.compare_results(results), failed=failed)
        print_all_type_metrics(results)

        result = results.get(approach.name)
        if result is None:
            raise typer.Exit(code=1)
        print_predictions(result.predictions)
        typer.echo("")

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo("Demo interrupted.")
        sys.exit(1)
    except TiEvalError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


if __name__ == "__main__":
    app()
