"""
Supabase implementation of ExercisesRepository.

This module provides the concrete Supabase implementation for looking up and
creating entries in the exercises catalog table.
"""
import logging
from typing import Optional, List, Dict, Any

from supabase import Client

logger = logging.getLogger(__name__)

CUSTOM_CATEGORY = "Custom"


def escape_like(value: str) -> str:
    """Backslash-escape SQL LIKE wildcards (``%``, ``_``, ``\\``)."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SupabaseExercisesRepository:
    """
    Supabase implementation of ExercisesRepository protocol.

    Provides methods on the exercises table for:
    - Exact name matching (case-insensitive)
    - Substring search on the name
    - Creating private custom exercises
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def find_by_exact_name(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Find an exercise by exact name match (case-insensitive).

        Args:
            name: The exercise name to search for

        Returns:
            Exercise dictionary or None if not found
        """
        try:
            result = (
                self._client.table("exercises")
                .select("id, name")
                .ilike("name", escape_like(name))
                .limit(1)
                .execute()
            )
            if result.data and len(result.data) > 0:
                return result.data[0]
            return None
        except Exception:
            logger.exception(f"Error finding exercise by name {name}")
            return None

    def find_by_name_fragment(self, fragment: str, limit: int = 1) -> List[Dict[str, Any]]:
        """
        Search for exercises whose name contains a fragment (ILIKE %fragment%).

        Args:
            fragment: Literal substring to search for
            limit: Maximum results to return

        Returns:
            List of matching exercises
        """
        pattern = f"%{escape_like(fragment)}%"
        try:
            result = (
                self._client.table("exercises")
                .select("id, name")
                .ilike("name", pattern)
                .limit(limit)
                .execute()
            )
            return result.data or []
        except Exception:
            logger.exception(f"Error searching exercises by fragment {fragment}")
            return []

    def create_custom_exercise(
        self,
        name: str,
        muscle_groups: List[str],
        is_compound: bool,
        created_by: str,
    ) -> Optional[Dict[str, Any]]:
        """
        Insert a private custom exercise.

        Args:
            name: Canonical exercise name
            muscle_groups: Muscle groups for the entry
            is_compound: Whether the movement is multi-joint
            created_by: Owning user ID

        Returns:
            The created exercise dictionary, or None on failure
        """
        record = {
            "name": name,
            "category": CUSTOM_CATEGORY,
            "muscle_groups": muscle_groups,
            "is_compound": is_compound,
            "created_by": created_by,
            "is_public": False,
        }
        try:
            result = self._client.table("exercises").insert(record).execute()
            if result.data and len(result.data) > 0:
                logger.info(f"Created custom exercise '{name}' for user {created_by}")
                return result.data[0]
            logger.error(f"Creating custom exercise '{name}' returned no row")
            return None
        except Exception:
            logger.exception(f"Error creating custom exercise {name}")
            return None
