"""
Domain models for the Training Log API.

These models represent the core strength-training concepts:
- SetEntry: One performed set (reps, weight in kg, optional RPE)
- ParsedExercise: An exercise recognized in free text, with its sets
- SessionMeta: Aggregates for a whole session (volume, sets, split)
- ParseResult: Exercises + session metadata + per-line warnings

Usage:
    >>> from domain.models import ParsedExercise, SetEntry

    >>> exercise = ParsedExercise(
    ...     raw_name="Bankdrücken",
    ...     normalized_name="Bankdrücken",
    ...     sets=[SetEntry(reps=10, weight=80, rpe=7)] * 4,
    ...     muscle_groups=["chest", "triceps", "front_delts"],
    ... )

    >>> # Serialize to JSON (total_volume_kg is included)
    >>> json_str = exercise.model_dump_json()
"""

from domain.models.parsed_exercise import ParsedExercise
from domain.models.session import ParseResult, SessionMeta, SplitType
from domain.models.set_entry import (
    DEFAULT_RPE,
    KG_PER_LB,
    MAX_REPS,
    MAX_SETS,
    MAX_WEIGHT_KG,
    SetEntry,
    to_kg,
)

__all__ = [
    # Value objects
    "SetEntry",
    # Entities
    "ParsedExercise",
    "SessionMeta",
    "ParseResult",
    # Enums
    "SplitType",
    # Units
    "DEFAULT_RPE",
    "KG_PER_LB",
    "MAX_REPS",
    "MAX_SETS",
    "MAX_WEIGHT_KG",
    "to_kg",
]
