"""Approach Protocol — structural interface for all type inference approaches."""

from collections.abc import Mapping
from typing import Any, Protocol

from ti_eval.approach.domain.prediction import TypePrediction

type ApproachOptions = Mapping[str, Any]


class Approach(Protocol):
    """Structural interface satisfied by any type inference approach.

    The evaluator calls ``initialize`` once before predicting over a set of
    test cases and ``dispose`` once afterwards, even when predicting fails.
    """

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    async def initialize(self, config: ApproachOptions) -> None: ...

    async def predict(
        self, source_code: str, file_path: str | None = None
    ) -> list[TypePrediction]: ...

    async def dispose(self) -> None: ...
