"""
Repository Interfaces (Ports) for the Training Log API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import TrainingLogRepository, ExercisesRepository

    class PersistTrainingLogUseCase:
        def __init__(self, training_log_repo: TrainingLogRepository, ...):
            self._repo = training_log_repo
"""

# Exercise catalog
from application.ports.exercises_repository import ExercisesRepository

# Training log persistence
from application.ports.training_log_repository import (
    TrainingLogRepository,
    WriteResult,
)

__all__ = [
    # Exercise catalog
    "ExercisesRepository",
    # Training log
    "TrainingLogRepository",
    "WriteResult",
]
