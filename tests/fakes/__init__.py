"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Forced-failure switches for partial-failure scenarios

Usage:
    from tests.fakes import FakeTrainingLogRepository, FakeExercisesRepository

    repo = FakeTrainingLogRepository(fail_tables={"exercise_sessions"})
    exercises = FakeExercisesRepository()
    exercises.seed([{"id": "ex-1", "name": "Dips"}])
"""

from tests.fakes.exercises_repository import FakeExercisesRepository
from tests.fakes.training_log_repository import FakeTrainingLogRepository

__all__ = [
    "FakeExercisesRepository",
    "FakeTrainingLogRepository",
]
