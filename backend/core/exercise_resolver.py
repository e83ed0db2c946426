"""
Exercise catalog resolution for persisted training logs.

Maps a parsed exercise to a row in the exercises catalog:
1. Exact name match (case-insensitive)
2. Loose match on the first word of the canonical name
3. Create a private custom exercise
4. Placeholder UUID when creation fails
"""
import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from application.ports import ExercisesRepository

logger = logging.getLogger(__name__)

# A custom exercise with at least this many muscle groups is compound
COMPOUND_MIN_MUSCLE_GROUPS = 3


class ResolutionMethod(str, Enum):
    """How the catalog id was determined."""
    EXACT = "exact"
    FUZZY = "fuzzy"
    CREATED = "created"
    PLACEHOLDER = "placeholder"


@dataclass
class CatalogResolution:
    """Result of resolving one exercise against the catalog."""
    exercise_id: str
    method: ResolutionMethod
    exercise_name: Optional[str] = None


class ExerciseCatalogResolver:
    """
    Find-or-create resolution of exercise names against the catalog.

    Never raises: repository lookups report failures as "no match", and a
    failed creation yields a placeholder id.
    """

    def __init__(self, exercises_repository: "ExercisesRepository"):
        """
        Args:
            exercises_repository: Repository for the exercises table
        """
        self._repo = exercises_repository

    def resolve(
        self,
        raw_name: str,
        normalized_name: str,
        muscle_groups: List[str],
        owner_user_id: str,
    ) -> CatalogResolution:
        """
        Resolve a parsed exercise to a catalog exercise id.

        Args:
            raw_name: Name as typed by the user (for logging)
            normalized_name: Canonical name used for matching and creation
            muscle_groups: Muscle groups stored on a created entry
            owner_user_id: User that owns a created entry

        Returns:
            CatalogResolution with the id and how it was found
        """
        match = self._try_exact_match(normalized_name)
        if match:
            return match

        match = self._try_first_word_match(normalized_name)
        if match:
            logger.info(f"Loose catalog match for '{raw_name}': '{match.exercise_name}'")
            return match

        return self._create_or_placeholder(normalized_name, muscle_groups, owner_user_id)

    def _try_exact_match(self, normalized_name: str) -> Optional[CatalogResolution]:
        row = self._repo.find_by_exact_name(normalized_name)
        if row and row.get("id"):
            return CatalogResolution(
                exercise_id=str(row["id"]),
                method=ResolutionMethod.EXACT,
                exercise_name=row.get("name"),
            )
        return None

    def _try_first_word_match(self, normalized_name: str) -> Optional[CatalogResolution]:
        """Substring match on the first word; deliberately loose."""
        words = normalized_name.split()
        if not words:
            return None

        rows = self._repo.find_by_name_fragment(words[0], limit=1)
        if rows and rows[0].get("id"):
            return CatalogResolution(
                exercise_id=str(rows[0]["id"]),
                method=ResolutionMethod.FUZZY,
                exercise_name=rows[0].get("name"),
            )
        return None

    def _create_or_placeholder(
        self,
        normalized_name: str,
        muscle_groups: List[str],
        owner_user_id: str,
    ) -> CatalogResolution:
        created = self._repo.create_custom_exercise(
            name=normalized_name,
            muscle_groups=list(muscle_groups),
            is_compound=len(muscle_groups) >= COMPOUND_MIN_MUSCLE_GROUPS,
            created_by=owner_user_id,
        )
        if created and created.get("id"):
            return CatalogResolution(
                exercise_id=str(created["id"]),
                method=ResolutionMethod.CREATED,
                exercise_name=created.get("name", normalized_name),
            )

        placeholder = str(uuid.uuid4())
        logger.error(
            f"Could not create catalog entry for '{normalized_name}', using placeholder {placeholder}"
        )
        return CatalogResolution(
            exercise_id=placeholder,
            method=ResolutionMethod.PLACEHOLDER,
            exercise_name=normalized_name,
        )
