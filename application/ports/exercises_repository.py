"""
Exercises Repository Interface (Port).

This module defines the abstract interface for the exercise catalog used when
persisting parsed training logs. Implementations may use Supabase or other
backends.
"""
from typing import Protocol, Optional, List, Dict, Any


class ExercisesRepository(Protocol):
    """
    Abstract interface for the exercise catalog.

    Used by the ExerciseCatalogResolver to find or create the catalog entry
    for each parsed exercise. Lookups return None or [] on failure; creation
    returns None when the row could not be written.
    """

    def find_by_exact_name(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Find an exercise by exact name match (case-insensitive).

        LIKE wildcards in `name` are matched literally.

        Args:
            name: The exercise name to search for

        Returns:
            Exercise dictionary or None if not found
        """
        ...

    def find_by_name_fragment(
        self, fragment: str, limit: int = 1
    ) -> List[Dict[str, Any]]:
        """
        Find exercises whose name contains `fragment` (case-insensitive).

        Args:
            fragment: Literal substring to search for
            limit: Maximum results to return

        Returns:
            List of matching exercises
        """
        ...

    def create_custom_exercise(
        self,
        name: str,
        muscle_groups: List[str],
        is_compound: bool,
        created_by: str,
    ) -> Optional[Dict[str, Any]]:
        """
        Insert a private, user-created catalog entry.

        Args:
            name: Canonical exercise name
            muscle_groups: Muscle groups for the entry
            is_compound: Whether the movement is multi-joint
            created_by: Owning user ID

        Returns:
            The created exercise dictionary, or None on failure
        """
        ...
