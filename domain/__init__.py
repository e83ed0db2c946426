"""
Domain layer for the Training Log API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    ParsedExercise,
    ParseResult,
    SessionMeta,
    SetEntry,
    SplitType,
)

__all__ = [
    "ParsedExercise",
    "ParseResult",
    "SessionMeta",
    "SetEntry",
    "SplitType",
]
