"""Approach configuration model."""

from typing import Any

from pydantic import BaseModel, Field


class ApproachConfig(BaseModel, frozen=True):
    type: str = Field(min_length=1)
    options: dict[str, Any] = Field(default_factory=dict)
