"""
Training Log Repository Interface (Port).

This module defines the abstract interface for the three tables a persisted
training log is written to:

- training_sessions: one session-summary row
- exercise_sessions: one detail container per session
- exercise_sets: one row per performed set

Each insert is an independent write step; there is no transaction spanning
them. Implementations never raise, they report the outcome as a WriteResult.
"""
from typing import Protocol, Optional, Dict, Any
from dataclasses import dataclass


@dataclass(frozen=True)
class WriteResult:
    """Outcome of one insert."""
    committed: bool
    record_id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, record_id: Optional[str]) -> "WriteResult":
        return cls(committed=True, record_id=record_id)

    @classmethod
    def failed(cls, error: str) -> "WriteResult":
        return cls(committed=False, error=error)


class TrainingLogRepository(Protocol):
    """
    Abstract interface for persisting parsed training logs.

    Used by PersistTrainingLogUseCase.
    """

    def insert_training_session(self, record: Dict[str, Any]) -> WriteResult:
        """
        Insert the session-summary row into training_sessions.

        Args:
            record: Column values (user_id, session_date, training_type, ...)

        Returns:
            WriteResult with the new row ID on success
        """
        ...

    def insert_exercise_session(self, record: Dict[str, Any]) -> WriteResult:
        """
        Insert the detail container row into exercise_sessions.

        Args:
            record: Column values (user_id, date, session_name, ...)

        Returns:
            WriteResult with the new row ID on success
        """
        ...

    def insert_exercise_set(self, record: Dict[str, Any]) -> WriteResult:
        """
        Insert one performed set into exercise_sets.

        Args:
            record: Column values (session_id, exercise_id, set_number, ...)

        Returns:
            WriteResult with the new row ID on success
        """
        ...
