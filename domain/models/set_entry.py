"""
SetEntry value object for a single performed set.

Weights are always stored in kilograms. Pounds only exist while a line is
being parsed and are converted with to_kg() before a SetEntry is built.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


# Conversion constant
KG_PER_LB = 0.45359237

# RPE assumed when the AI fallback (or a set record) has none
DEFAULT_RPE = 7.0

WeightUnit = Literal["kg", "lb"]

# Upper bounds for one set clause
MAX_SETS = 100
MAX_REPS = 1000
MAX_WEIGHT_KG = 10000.0


def to_kg(weight: float, unit: WeightUnit = "kg") -> float:
    """
    Convert a weight to kilograms.

    Pounds are converted and rounded to one decimal place; kilograms are
    returned unchanged.

    Examples:
        >>> to_kg(100, "lb")
        45.4
        >>> to_kg(80)
        80
    """
    if unit == "lb":
        return round(weight * KG_PER_LB, 1)
    return weight


class SetEntry(BaseModel):
    """
    Value object representing one performed set.

    Examples:
        >>> SetEntry(reps=10, weight=80, rpe=7)
        SetEntry(reps=10, weight=80.0, rpe=7.0)
    """

    reps: int = Field(..., gt=0, le=MAX_REPS, description="Repetitions performed")
    weight: float = Field(
        ..., ge=0, le=MAX_WEIGHT_KG, allow_inf_nan=False, description="Load in kilograms"
    )
    rpe: Optional[float] = Field(
        default=None,
        ge=1,
        le=10,
        allow_inf_nan=False,
        description="Rate of perceived exertion (1-10)",
    )

    @property
    def volume_kg(self) -> float:
        """Reps times weight for this set."""
        return self.reps * self.weight

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"reps": 10, "weight": 80.0, "rpe": 7},
                {"reps": 5, "weight": 45.4},
            ]
        },
    }
