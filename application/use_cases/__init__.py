"""
Application Use Cases for the Training Log API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result dataclasses, not API responses

Usage:
    from application.use_cases import PersistTrainingLogUseCase

    use_case = PersistTrainingLogUseCase(
        training_log_repo=training_log_repo,
        resolver=ExerciseCatalogResolver(exercises_repo),
    )
    result = use_case.execute(
        parse_result,
        raw_text=raw_text,
        user_id="user-123",
        session_date=date.today(),
        training_type="strength",
    )
"""

from application.use_cases.persist_training_log import (
    PersistTrainingLogResult,
    PersistTrainingLogUseCase,
)

__all__ = [
    "PersistTrainingLogUseCase",
    "PersistTrainingLogResult",
]
