"""
PersistTrainingLog Use Case.

Writes a finalized ParseResult to the relational store in three independent
steps:

1. Session summary (training_sessions). Fatal on failure.
2. Detail container (exercise_sessions). Logged and skipped on failure.
3. Per-set rows (exercise_sets), one per SetEntry, each exercise resolved
   against the catalog first. Failures are counted, never fatal.

There is no transaction and no compensation: once step 1 has committed the
summary stays, whatever happens afterwards.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from application.ports import TrainingLogRepository, WriteResult
from backend.core.exercise_resolver import ExerciseCatalogResolver
from domain.models import DEFAULT_RPE, ParsedExercise, ParseResult

logger = logging.getLogger(__name__)

SOURCE_TAG = "layer2_notes"
DETAIL_WORKOUT_TYPE = "strength"

# Workout categories stored under a different name in training_sessions
TRAINING_TYPE_ALIASES = {"strength": "rpt"}

SUMMARY_WRITE_FAILED = "Failed to save training session"


def map_training_type(training_type: str) -> str:
    """Map the request's workout category to the stored training_type."""
    return TRAINING_TYPE_ALIASES.get(training_type, training_type)


def session_name_for(session_date: date) -> str:
    """Display name of the detail container ("Training DD.MM.YYYY")."""
    return f"Training {session_date.strftime('%d.%m.%Y')}"


@dataclass
class PersistTrainingLogResult:
    """Result of the PersistTrainingLog use case execution."""

    success: bool
    training_session_id: Optional[str] = None
    exercise_session_id: Optional[str] = None
    error: Optional[str] = None
    details: Optional[str] = None
    sets_written: int = 0
    sets_failed: int = 0
    step_errors: List[str] = field(default_factory=list)


class PersistTrainingLogUseCase:
    """
    Use case for storing a parsed training log.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> use_case = PersistTrainingLogUseCase(
        ...     training_log_repo=training_log_repo,
        ...     resolver=ExerciseCatalogResolver(exercises_repo),
        ... )
        >>> result = use_case.execute(
        ...     parse_result,
        ...     raw_text="Bankdrücken 4x10 80kg @7",
        ...     user_id="user-123",
        ...     session_date=date(2024, 5, 1),
        ...     training_type="strength",
        ... )
        >>> if result.success:
        ...     print(f"Saved session: {result.training_session_id}")
    """

    def __init__(
        self,
        training_log_repo: TrainingLogRepository,
        resolver: ExerciseCatalogResolver,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            training_log_repo: Repository for the three training-log tables
            resolver: Catalog resolver for exercise ids
        """
        self._repo = training_log_repo
        self._resolver = resolver

    def execute(
        self,
        parse_result: ParseResult,
        *,
        raw_text: str,
        user_id: str,
        session_date: date,
        training_type: str = "strength",
    ) -> PersistTrainingLogResult:
        """
        Execute the persist workflow.

        Sets `matched_exercise_id` on every exercise of `parse_result` that
        reaches step 3.

        Args:
            parse_result: Finalized parse result to store
            raw_text: The user's original text (kept in session_data)
            user_id: Owning user
            session_date: Calendar date of the session
            training_type: Workout category from the request

        Returns:
            PersistTrainingLogResult; success reflects step 1 only
        """
        logger.info(
            f"Persisting training log for user {user_id}: "
            f"{len(parse_result.exercises)} exercises on {session_date.isoformat()}"
        )

        # Step 1: session summary
        summary = self._repo.insert_training_session(
            self._summary_record(parse_result, raw_text, user_id, session_date, training_type)
        )
        if not summary.committed:
            logger.error(f"Training session summary write failed: {summary.error}")
            return PersistTrainingLogResult(
                success=False,
                error=SUMMARY_WRITE_FAILED,
                details=summary.error,
            )

        result = PersistTrainingLogResult(success=True, training_session_id=summary.record_id)

        # Step 2: detail container
        container = self._repo.insert_exercise_session(
            self._container_record(user_id, session_date, summary.record_id)
        )
        if not container.committed:
            logger.error(f"Exercise session container write failed: {container.error}")
            result.step_errors.append(f"exercise_sessions: {container.error}")
            return result

        result.exercise_session_id = container.record_id

        # Step 3: per-set rows
        for exercise in parse_result.exercises:
            self._write_exercise_sets(exercise, result, user_id, session_date)

        logger.info(
            f"Persisted training session {result.training_session_id}: "
            f"{result.sets_written} sets written, {result.sets_failed} failed"
        )
        return result

    def _summary_record(
        self,
        parse_result: ParseResult,
        raw_text: str,
        user_id: str,
        session_date: date,
        training_type: str,
    ) -> Dict[str, Any]:
        meta = parse_result.session_meta
        return {
            "user_id": user_id,
            "session_date": session_date.isoformat(),
            "training_type": map_training_type(training_type),
            "split_type": meta.split_type.value,
            "total_duration_minutes": meta.estimated_duration_minutes,
            "total_volume_kg": meta.total_volume_kg,
            "session_data": {
                "raw_text": raw_text,
                "parsed_exercises": [e.model_dump(mode="json") for e in parse_result.exercises],
                "source": SOURCE_TAG,
            },
        }

    def _container_record(
        self,
        user_id: str,
        session_date: date,
        training_session_id: Optional[str],
    ) -> Dict[str, Any]:
        return {
            "user_id": user_id,
            "date": session_date.isoformat(),
            "session_name": session_name_for(session_date),
            "workout_type": DETAIL_WORKOUT_TYPE,
            "metadata": {
                "source": SOURCE_TAG,
                "training_session_id": training_session_id,
            },
        }

    def _write_exercise_sets(
        self,
        exercise: ParsedExercise,
        result: PersistTrainingLogResult,
        user_id: str,
        session_date: date,
    ) -> None:
        resolution = self._resolver.resolve(
            raw_name=exercise.raw_name,
            normalized_name=exercise.normalized_name,
            muscle_groups=exercise.muscle_groups,
            owner_user_id=user_id,
        )
        exercise.matched_exercise_id = resolution.exercise_id

        for set_number, entry in enumerate(exercise.sets, start=1):
            written: WriteResult = self._repo.insert_exercise_set({
                "session_id": result.exercise_session_id,
                "user_id": user_id,
                "exercise_id": resolution.exercise_id,
                "set_number": set_number,
                "weight_kg": entry.weight,
                "reps": entry.reps,
                "rpe": entry.rpe if entry.rpe is not None else DEFAULT_RPE,
                "date": session_date.isoformat(),
                "origin": SOURCE_TAG,
            })
            if written.committed:
                result.sets_written += 1
            else:
                result.sets_failed += 1
                logger.error(
                    f"Set {set_number} of '{exercise.normalized_name}' failed: {written.error}"
                )
