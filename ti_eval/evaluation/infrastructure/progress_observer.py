"""ProgressEvaluationObserver — renders one Rich progress bar per approach to stderr."""

import sys

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

# ANSI color names for approach descriptions (Rich markup style).
_APPROACH_COLORS: list[str] = [
    "cyan",
    "green",
    "yellow",
    "magenta",
    "blue",
]


def _make_progress(console: Console) -> Progress:
    """Create a Progress instance with the standard column layout."""
    return Progress(
        TextColumn("{task.description}"),
        BarColumn(bar_width=40, complete_style="bright_green"),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        TextColumn("{task.fields[status]}"),
        console=console,
        refresh_per_second=10,
        transient=False,
    )


class ProgressEvaluationObserver:
    """Renders a progress bar per evaluated approach on stderr.

    A row is added when an approach starts and advances once per completed
    test case. Failed approaches keep their row, marked as failed. ANSI
    colour is applied to approach labels when stderr is a TTY.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests).

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._completed: dict[str, int] = {}
        self._task_ids: dict[str, TaskID] = {}
        self._progress: Progress | None = None

    def completed_for(self, approach: str) -> int:
        """Test cases finished so far for approach (0 if never started)."""
        return self._completed.get(approach, 0)

    def _make_desc(self, name: str, index: int) -> str:
        if sys.stderr.isatty():
            color = _APPROACH_COLORS[index % len(_APPROACH_COLORS)]
            return f"[{color}]{name}[/{color}]"
        return name

    def _ensure_progress(self) -> Progress:
        if self._progress is None:
            self._progress = _make_progress(console=Console(stderr=True))
            self._progress.start()
        return self._progress

    def _update(self, approach: str, status: str | None = None) -> None:
        if self._disabled or approach not in self._task_ids:
            return
        progress = self._ensure_progress()
        fields = {} if status is None else {"status": status}
        progress.update(
            self._task_ids[approach], completed=self._completed[approach], **fields
        )

    def approach_registered(self, approach: str, replaced: bool) -> None:
        pass

    def evaluation_started(self, approach: str, total_test_cases: int) -> None:
        self._completed[approach] = 0
        if self._disabled:
            return
        progress = self._ensure_progress()
        desc = self._make_desc(name=approach, index=len(self._task_ids))
        self._task_ids[approach] = progress.add_task(
            description=desc, total=float(total_test_cases), status=""
        )

    def test_case_started(
        self, approach: str, test_case_id: str, test_case_name: str
    ) -> None:
        pass

    def test_case_completed(
        self, approach: str, test_case_id: str, total_predictions: int
    ) -> None:
        if approach in self._completed:
            self._completed[approach] += 1
        self._update(approach=approach)

    def evaluation_completed(
        self,
        approach: str,
        accuracy: float,
        correct_predictions: int,
        total_predictions: int,
        execution_time_seconds: float,
    ) -> None:
        self._update(approach=approach, status=f"accuracy {accuracy:.2%}")

    def evaluation_failed(self, approach: str, reason: str) -> None:
        self._update(approach=approach, status="[red]failed[/red]")

    def dispose_failed(self, approach: str, reason: str) -> None:
        pass

    def stop(self) -> None:
        """Stop rendering; safe to call when nothing was started."""
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_ids = {}
