"""IdentifierOccurrence — one value-bearing identifier found during traversal."""

from pydantic import BaseModel, Field

from ti_eval.core.position import SourcePosition


class IdentifierOccurrence(BaseModel, frozen=True):
    """Identifier plus the positional and contextual metadata an approach needs.

    Approaches turn occurrences into predictions; the occurrence itself carries
    no type information.
    """

    name: str = Field(min_length=1)
    position: SourcePosition
    scope: str
    syntactic_context: str
    semantic_hints: list[str] = Field(default_factory=list)
    usage_patterns: list[str] = Field(default_factory=list)
