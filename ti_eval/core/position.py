"""SourcePosition: where an identifier occurrence starts in its source unit."""

from pydantic import BaseModel, Field


class SourcePosition(BaseModel, frozen=True):
    """1-based line and 0-based column of an identifier's first character.

    Ground truth and predictions must use the same convention, since matching
    compares positions exactly.
    """

    line: int = Field(ge=1)
    column: int = Field(ge=0)
