"""
Session-level aggregates: split classification, session metadata and the
ParseResult returned by the parsing layer.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from domain.models.parsed_exercise import ParsedExercise


class SplitType(str, Enum):
    """Which muscle groups a training session targeted."""

    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    UPPER = "upper"
    LOWER = "lower"
    FULL_BODY = "full_body"


class SessionMeta(BaseModel):
    """Aggregate metadata derived from a list of parsed exercises."""

    split_type: SplitType = Field(default=SplitType.FULL_BODY)
    total_volume_kg: float = Field(default=0.0, ge=0)
    total_sets: int = Field(default=0, ge=0)
    estimated_duration_minutes: int = Field(default=0, ge=0)


class ParseResult(BaseModel):
    """
    Outcome of parsing one training log.

    Created fresh per request. Either returned as a preview or consumed once
    by the persistence use case.
    """

    exercises: List[ParsedExercise] = Field(default_factory=list)
    session_meta: SessionMeta = Field(default_factory=SessionMeta)
    warnings: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.exercises
