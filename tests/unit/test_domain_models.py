"""
Unit tests for the domain models.
"""
import math

import pytest
from pydantic import ValidationError

from domain.models import MAX_REPS, MAX_WEIGHT_KG, ParsedExercise, SetEntry, to_kg


@pytest.mark.unit
class TestToKg:

    def test_pounds_round_to_one_decimal(self):
        assert to_kg(100, "lb") == 45.4

    def test_kilograms_unchanged(self):
        assert to_kg(80) == 80
        assert to_kg(82.5, "kg") == 82.5


@pytest.mark.unit
class TestSetEntry:

    def test_volume(self):
        assert SetEntry(reps=10, weight=80).volume_kg == 800.0

    @pytest.mark.parametrize(
        "values",
        [
            {"reps": 0, "weight": 80},
            {"reps": MAX_REPS + 1, "weight": 80},
            {"reps": 5, "weight": -1},
            {"reps": 5, "weight": MAX_WEIGHT_KG + 1},
            {"reps": 5, "weight": math.inf},
            {"reps": 5, "weight": math.nan},
            {"reps": 5, "weight": 80, "rpe": 10.5},
            {"reps": 5, "weight": 80, "rpe": math.nan},
        ],
    )
    def test_invalid_values_rejected(self, values):
        with pytest.raises(ValidationError):
            SetEntry(**values)

    def test_is_frozen(self):
        entry = SetEntry(reps=5, weight=100)
        with pytest.raises(ValidationError):
            entry.reps = 6


@pytest.mark.unit
def test_parsed_exercise_volume_follows_sets():
    exercise = ParsedExercise(
        raw_name="bench",
        normalized_name="Bankdrücken",
        sets=[SetEntry(reps=10, weight=80)] * 4,
    )

    assert exercise.total_volume_kg == 3200.0
    assert exercise.set_count == 4
    assert exercise.muscle_groups == ["other"]
