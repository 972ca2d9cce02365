"""TypePrediction: an approach's guess of one identifier's type."""

from pydantic import BaseModel, Field

from ti_eval.core.position import SourcePosition


class PredictionContext(BaseModel, frozen=True):
    """Scope and contextual metadata observed where the identifier occurs."""

    scope: str
    syntactic_context: str
    semantic_hints: list[str] = Field(default_factory=list)
    usage_patterns: list[str] = Field(default_factory=list)


class TypePrediction(BaseModel, frozen=True):
    """Immutable record of a predicted type label at a source position."""

    identifier: str = Field(min_length=1)
    predicted_type: str
    position: SourcePosition
    context: PredictionContext
