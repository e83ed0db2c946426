"""
Unit tests for session summarization and split inference.
"""
import pytest

from backend.core.session_summary import build_parse_result, infer_split_type, summarize_session
from domain.models import ParsedExercise, SetEntry, SplitType


def _exercise(name, groups, sets=3, reps=10, weight=50.0):
    return ParsedExercise(
        raw_name=name,
        normalized_name=name,
        sets=[SetEntry(reps=reps, weight=weight)] * sets,
        muscle_groups=groups,
    )


@pytest.mark.unit
class TestInferSplitType:
    """Tests for split classification."""

    @pytest.mark.parametrize(
        "groups, expected",
        [
            ({"chest", "triceps"}, SplitType.PUSH),
            ({"lats", "biceps", "mid_back"}, SplitType.PULL),
            ({"quads", "glutes", "core"}, SplitType.LEGS),
            ({"chest", "lats"}, SplitType.UPPER),
            ({"chest", "lats", "quads"}, SplitType.FULL_BODY),
            ({"hamstrings", "lats"}, SplitType.FULL_BODY),
            ({"other"}, SplitType.FULL_BODY),
            (set(), SplitType.FULL_BODY),
        ],
    )
    def test_rules(self, groups, expected):
        assert infer_split_type(groups) == expected

    def test_lower_is_never_inferred(self):
        assert infer_split_type({"quads", "hamstrings", "glutes", "lower_back"}) == SplitType.LEGS


@pytest.mark.unit
class TestSummarizeSession:
    """Tests for SessionMeta aggregation."""

    def test_totals_match_exercises(self):
        exercises = [
            _exercise("Kniebeugen", ["quads", "glutes", "hamstrings", "core"], sets=3, reps=8, weight=100),
            _exercise("Kreuzheben", ["hamstrings", "glutes", "lower_back", "traps"], sets=3, reps=5, weight=120),
        ]

        meta = summarize_session(exercises)

        assert meta.split_type == SplitType.LEGS
        assert meta.total_sets == 6
        assert meta.total_volume_kg == 4200.0
        assert meta.total_volume_kg == sum(e.total_volume_kg for e in exercises)
        assert meta.estimated_duration_minutes == 12

    def test_empty_session(self):
        meta = summarize_session([])
        assert meta.total_sets == 0
        assert meta.total_volume_kg == 0
        assert meta.estimated_duration_minutes == 0
        assert meta.split_type == SplitType.FULL_BODY

    def test_build_parse_result_copies_warnings(self):
        warnings = ["line not recognized: ???"]
        result = build_parse_result([_exercise("Dips", ["triceps", "chest"])], warnings)

        assert result.warnings == warnings
        assert result.warnings is not warnings
        assert result.session_meta.split_type == SplitType.PUSH


@pytest.mark.unit
class TestEndToEndDeterministic:
    """Deterministic parse plus summary for whole logs."""

    def test_leg_day_scenario(self, line_parser):
        exercises, warnings = line_parser.parse("Kniebeugen 3x8 100kg\nKreuzheben 3x5 120kg")
        result = build_parse_result(exercises, warnings)

        assert result.session_meta.split_type == SplitType.LEGS
        assert result.session_meta.total_sets == 6
        assert result.session_meta.total_volume_kg == 4200.0
        assert result.warnings == []

    def test_push_scenario(self, line_parser):
        exercises, warnings = line_parser.parse("Bankdrücken 4x10 80kg @7")
        result = build_parse_result(exercises, warnings)

        assert result.session_meta.split_type == SplitType.PUSH
        assert result.session_meta.total_volume_kg == 3200.0
        assert result.session_meta.estimated_duration_minutes == 8

    def test_recognized_and_garbage_line(self, line_parser):
        exercises, warnings = line_parser.parse("Bankdrücken 4x10 80kg @7\n???")
        result = build_parse_result(exercises, warnings)

        assert len(result.exercises) == 1
        assert len(result.warnings) == 1
