"""
Markdown rendering of a parsed training session.

Produces a per-exercise set table followed by technique cues and a
progression recommendation derived from the mean RPE.
"""
from datetime import date
from typing import List, Sequence

from backend.core.vocabulary import ExerciseVocabulary
from domain.models import DEFAULT_RPE, ParsedExercise, ParseResult, SetEntry

INCREASE_LOAD_MAX_RPE = 7.0
HOLD_LOAD_MAX_RPE = 8.5

ADVICE_NO_SETS = "- No sets recorded."
ADVICE_INCREASE = "- Raise the load by 2.5-5% while RPE stays at or below 7."
ADVICE_HOLD = "- Hold the load and refine technique."
ADVICE_REDUCE = "- Reduce the load or plan more recovery."


def _format_number(value: float) -> str:
    return f"{value:g}"


def average_rpe(sets: Sequence[SetEntry]) -> float:
    """Mean RPE over the sets, counting a missing RPE as the default."""
    if not sets:
        return 0.0
    return sum(s.rpe if s.rpe is not None else DEFAULT_RPE for s in sets) / len(sets)


def progression_advice(sets: Sequence[SetEntry]) -> str:
    if not sets:
        return ADVICE_NO_SETS
    avg = average_rpe(sets)
    if avg <= INCREASE_LOAD_MAX_RPE:
        return ADVICE_INCREASE
    if avg <= HOLD_LOAD_MAX_RPE:
        return ADVICE_HOLD
    return ADVICE_REDUCE


def _render_exercise(exercise: ParsedExercise, vocabulary: ExerciseVocabulary) -> List[str]:
    lines = [
        f"## {exercise.normalized_name}",
        "| Set | Weight | Reps | RPE |",
        "|-----|--------|------|-----|",
    ]
    for index, entry in enumerate(exercise.sets, start=1):
        rpe = _format_number(entry.rpe) if entry.rpe is not None else "-"
        lines.append(f"| {index} | {_format_number(entry.weight)} kg | {entry.reps} | {rpe} |")

    if exercise.notes:
        lines.extend(["", f"_{exercise.notes}_"])

    lines.extend(["", "**Technique**"])
    lines.extend(f"- {hint}" for hint in vocabulary.hints_for(exercise.normalized_name))

    lines.extend(["", "**Progression**", progression_advice(exercise.sets), "", "---", ""])
    return lines


def render_training_markdown(
    parse_result: ParseResult,
    session_date: date,
    vocabulary: ExerciseVocabulary,
) -> str:
    """
    Render a ParseResult as a Markdown training report.

    Args:
        parse_result: Finalized parse result
        session_date: Date shown in the title
        vocabulary: Source of the technique cues

    Returns:
        Markdown document, one section per exercise
    """
    lines = [f"# Training Day - {session_date.isoformat()}", ""]
    for exercise in parse_result.exercises:
        lines.extend(_render_exercise(exercise, vocabulary))
    return "\n".join(lines).rstrip() + "\n"
