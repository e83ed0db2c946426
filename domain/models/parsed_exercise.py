"""
ParsedExercise entity produced by the deterministic and AI parsers.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from domain.models.set_entry import SetEntry


class ParsedExercise(BaseModel):
    """
    One exercise recognized in a training log.

    `sets` keeps input order. `total_volume_kg` is derived from the sets and
    can never drift from them. `matched_exercise_id` stays empty until the
    exercise is resolved against the catalog during persistence.

    Examples:
        >>> ex = ParsedExercise(
        ...     raw_name="bench",
        ...     normalized_name="Bankdrücken",
        ...     sets=[SetEntry(reps=10, weight=80)] * 4,
        ...     muscle_groups=["chest", "triceps", "front_delts"],
        ... )
        >>> ex.total_volume_kg
        3200.0
    """

    raw_name: str = Field(..., description="Exercise name as typed by the user")
    normalized_name: str = Field(..., description="Canonical exercise name")
    sets: List[SetEntry] = Field(default_factory=list, description="Performed sets in input order")
    muscle_groups: List[str] = Field(
        default_factory=lambda: ["other"],
        description="Muscle groups inferred from the canonical name",
    )
    matched_exercise_id: Optional[str] = Field(
        default=None,
        description="Catalog exercise id, set at persistence time",
    )
    notes: Optional[str] = Field(default=None, description="Free-text notes (AI fallback only)")

    @computed_field
    @property
    def total_volume_kg(self) -> float:
        """Sum of reps x weight over all sets."""
        return sum(s.volume_kg for s in self.sets)

    @property
    def set_count(self) -> int:
        return len(self.sets)
