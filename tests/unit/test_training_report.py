"""
Unit tests for the Markdown training report.
"""
from datetime import date

import pytest

from backend.core.session_summary import build_parse_result
from backend.core.training_report import (
    ADVICE_HOLD,
    ADVICE_INCREASE,
    ADVICE_NO_SETS,
    ADVICE_REDUCE,
    average_rpe,
    progression_advice,
    render_training_markdown,
)
from domain.models import ParseResult, SetEntry


@pytest.mark.unit
class TestProgressionAdvice:

    def test_missing_rpe_counts_as_default(self):
        assert average_rpe([SetEntry(reps=5, weight=100), SetEntry(reps=5, weight=100, rpe=9)]) == 8.0

    def test_no_sets(self):
        assert average_rpe([]) == 0.0
        assert progression_advice([]) == ADVICE_NO_SETS

    @pytest.mark.parametrize(
        "rpe, expected",
        [(6.0, ADVICE_INCREASE), (7.0, ADVICE_INCREASE), (8.0, ADVICE_HOLD), (8.5, ADVICE_HOLD), (9.0, ADVICE_REDUCE)],
    )
    def test_thresholds(self, rpe, expected):
        assert progression_advice([SetEntry(reps=5, weight=100, rpe=rpe)]) == expected


@pytest.mark.unit
class TestRenderTrainingMarkdown:

    def test_report_layout(self, line_parser, vocabulary):
        exercises, warnings = line_parser.parse("Bankdrücken 2x10 80kg @7\nKniebeugen 1x8 102,5kg")
        result = build_parse_result(exercises, warnings)

        markdown = render_training_markdown(result, date(2024, 5, 1), vocabulary)

        assert markdown.startswith("# Training Day - 2024-05-01\n")
        assert "## Bankdrücken" in markdown
        assert "## Kniebeugen" in markdown
        assert "| 1 | 80 kg | 10 | 7 |" in markdown
        assert "| 2 | 80 kg | 10 | 7 |" in markdown
        assert "| 1 | 102.5 kg | 8 | - |" in markdown
        assert "- Retract the shoulder blades, stable stance." in markdown
        assert markdown.count("**Progression**") == 2
        assert markdown.endswith("---\n")

    def test_unknown_exercise_uses_default_hints(self, line_parser, vocabulary):
        exercises, _ = line_parser.parse("farmer walk 1x1 40kg")
        markdown = render_training_markdown(build_parse_result(exercises), date(2024, 5, 1), vocabulary)

        assert "## Farmer Walk" in markdown
        assert "- Clean technique before load." in markdown

    def test_empty_result_has_only_title(self, vocabulary):
        markdown = render_training_markdown(ParseResult(), date(2024, 5, 1), vocabulary)
        assert markdown == "# Training Day - 2024-05-01\n"
