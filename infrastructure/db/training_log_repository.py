"""
Supabase Training Log Repository Implementation.

This module implements the TrainingLogRepository protocol using Supabase as
the backend. Every insert is its own request; failures are logged and
returned as a failed WriteResult.
"""
import logging
from typing import Any, Dict

from supabase import Client

from application.ports.training_log_repository import WriteResult

logger = logging.getLogger(__name__)

TRAINING_SESSIONS_TABLE = "training_sessions"
EXERCISE_SESSIONS_TABLE = "exercise_sessions"
EXERCISE_SETS_TABLE = "exercise_sets"


class SupabaseTrainingLogRepository:
    """
    Supabase implementation of TrainingLogRepository protocol.

    Usage:
        repo = SupabaseTrainingLogRepository(client)
        result = repo.insert_training_session({"user_id": "u1", ...})
        if result.committed:
            print(result.record_id)
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def _insert(self, table: str, record: Dict[str, Any]) -> WriteResult:
        try:
            result = self._client.table(table).insert(record).execute()
        except Exception as e:
            logger.exception(f"Error inserting into {table}")
            return WriteResult.failed(str(e))

        if not result.data:
            logger.error(f"Insert into {table} returned no row")
            return WriteResult.failed(f"insert into {table} returned no row")

        record_id = result.data[0].get("id")
        return WriteResult.ok(str(record_id) if record_id is not None else None)

    def insert_training_session(self, record: Dict[str, Any]) -> WriteResult:
        """Insert the session-summary row."""
        return self._insert(TRAINING_SESSIONS_TABLE, record)

    def insert_exercise_session(self, record: Dict[str, Any]) -> WriteResult:
        """Insert the detail container row."""
        return self._insert(EXERCISE_SESSIONS_TABLE, record)

    def insert_exercise_set(self, record: Dict[str, Any]) -> WriteResult:
        """Insert one per-set row."""
        return self._insert(EXERCISE_SETS_TABLE, record)
