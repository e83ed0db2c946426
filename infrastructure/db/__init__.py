"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into services
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseExercisesRepository,
        SupabaseTrainingLogRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    exercises_repo = SupabaseExercisesRepository(client)
    training_log_repo = SupabaseTrainingLogRepository(client)
"""

from infrastructure.db.exercises_repository import SupabaseExercisesRepository
from infrastructure.db.training_log_repository import SupabaseTrainingLogRepository

__all__ = [
    # Exercise catalog
    "SupabaseExercisesRepository",

    # Training log persistence
    "SupabaseTrainingLogRepository",
]
