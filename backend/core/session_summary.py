"""
Session summarization: split classification, totals and duration estimate.

Both parsers hand their exercises to `build_parse_result`, so session
metadata is always derived from the exercises and never copied from an
upstream payload.
"""
import logging
from typing import Iterable, List, Optional, Set

from domain.models import ParsedExercise, ParseResult, SessionMeta, SplitType

logger = logging.getLogger(__name__)

PUSH_GROUPS = frozenset({"chest", "triceps", "front_delts"})
PULL_GROUPS = frozenset({"lats", "biceps", "rear_delts"})
LEG_GROUPS = frozenset({"quads", "hamstrings", "glutes"})

MINUTES_PER_SET = 2


def infer_split_type(muscle_groups: Iterable[str]) -> SplitType:
    """
    Classify a session from the union of its muscle groups.

    Rules are checked in order: push only, pull only, legs only, push and
    pull, otherwise full body. LOWER is never inferred; legs combined with
    any upper-body group is a full-body session.
    """
    groups: Set[str] = set(muscle_groups)
    has_push = bool(groups & PUSH_GROUPS)
    has_pull = bool(groups & PULL_GROUPS)
    has_legs = bool(groups & LEG_GROUPS)

    if has_push and not has_pull and not has_legs:
        return SplitType.PUSH
    if has_pull and not has_push and not has_legs:
        return SplitType.PULL
    if has_legs and not has_push and not has_pull:
        return SplitType.LEGS
    if has_push and has_pull and not has_legs:
        return SplitType.UPPER
    return SplitType.FULL_BODY


def summarize_session(exercises: List[ParsedExercise]) -> SessionMeta:
    """Compute SessionMeta for a list of parsed exercises."""
    all_groups: Set[str] = set()
    for exercise in exercises:
        all_groups.update(exercise.muscle_groups)

    total_sets = sum(exercise.set_count for exercise in exercises)
    total_volume = sum(exercise.total_volume_kg for exercise in exercises)

    return SessionMeta(
        split_type=infer_split_type(all_groups),
        total_volume_kg=total_volume,
        total_sets=total_sets,
        estimated_duration_minutes=round(total_sets * MINUTES_PER_SET),
    )


def build_parse_result(
    exercises: List[ParsedExercise],
    warnings: Optional[List[str]] = None,
) -> ParseResult:
    """Wrap exercises and warnings into a ParseResult with fresh metadata."""
    meta = summarize_session(exercises)
    logger.debug(
        f"Session summary: split={meta.split_type.value} sets={meta.total_sets} "
        f"volume={meta.total_volume_kg}kg"
    )
    return ParseResult(
        exercises=list(exercises),
        session_meta=meta,
        warnings=list(warnings or []),
    )
