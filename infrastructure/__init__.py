"""
Infrastructure Layer for the Training Log API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseExercisesRepository,
    SupabaseTrainingLogRepository,
)

__all__ = [
    "SupabaseExercisesRepository",
    "SupabaseTrainingLogRepository",
]
