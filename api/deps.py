"""
FastAPI Dependency Providers for the Training Log API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings, the Supabase client, the vocabulary and the AI parser are cached
  per-process (lru_cache)
- Repository, parser and use-case providers create new instances per-request
- Database-backed providers return None when Supabase is not configured, so
  preview parsing works without a database

Usage in routers:
    from api.deps import get_parsing_orchestrator, get_current_user

    @router.post("/training-log/parse")
    def parse(
        user_id: str = Depends(get_current_user),
        orchestrator: ParsingOrchestrator = Depends(get_parsing_orchestrator),
    ):
        return orchestrator.parse(...)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_training_log_repo] = lambda: FakeTrainingLogRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import ExercisesRepository, TrainingLogRepository

# Concrete implementations
from infrastructure import SupabaseExercisesRepository, SupabaseTrainingLogRepository

from application.use_cases import PersistTrainingLogUseCase
from backend.auth import authenticate_request
from backend.core.exercise_resolver import ExerciseCatalogResolver
from backend.core.line_parser import DeterministicLineParser
from backend.core.vocabulary import ExerciseVocabulary, get_default_vocabulary
from backend.services.ai_fallback_parser import AiFallbackParser
from backend.services.parsing_orchestrator import ParsingOrchestrator
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.database_configured:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


# =============================================================================
# Repository Providers
# =============================================================================


def get_exercises_repo(
    client: Optional[Client] = Depends(get_supabase_client),
) -> Optional[ExercisesRepository]:
    """
    Get exercises catalog repository instance.

    Returns:
        ExercisesRepository implementation, or None without a database
    """
    if client is None:
        return None
    return SupabaseExercisesRepository(client)


def get_training_log_repo(
    client: Optional[Client] = Depends(get_supabase_client),
) -> Optional[TrainingLogRepository]:
    """
    Get training log repository instance.

    Returns:
        TrainingLogRepository implementation, or None without a database
    """
    if client is None:
        return None
    return SupabaseTrainingLogRepository(client)


# =============================================================================
# Parsing Providers
# =============================================================================


def get_vocabulary() -> ExerciseVocabulary:
    """Get the process-wide exercise vocabulary."""
    return get_default_vocabulary()


def get_line_parser(
    vocabulary: ExerciseVocabulary = Depends(get_vocabulary),
) -> DeterministicLineParser:
    """Get a deterministic line parser bound to the vocabulary."""
    return DeterministicLineParser(vocabulary)


@lru_cache
def get_ai_fallback_parser() -> AiFallbackParser:
    """
    Get the AI fallback parser (cached).

    Without AI_GATEWAY_API_KEY the parser has no client and every call
    returns None.
    """
    return AiFallbackParser.from_settings(_get_settings(), get_default_vocabulary())


def get_parsing_orchestrator(
    line_parser: DeterministicLineParser = Depends(get_line_parser),
    ai_parser: AiFallbackParser = Depends(get_ai_fallback_parser),
) -> ParsingOrchestrator:
    """Get the parsing orchestrator."""
    return ParsingOrchestrator(line_parser, ai_parser)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_persist_training_log_use_case(
    exercises_repo: Optional[ExercisesRepository] = Depends(get_exercises_repo),
    training_log_repo: Optional[TrainingLogRepository] = Depends(get_training_log_repo),
) -> Optional[PersistTrainingLogUseCase]:
    """
    Get the persist use case.

    Returns:
        PersistTrainingLogUseCase, or None when the database is not configured
    """
    if exercises_repo is None or training_log_repo is None:
        return None
    return PersistTrainingLogUseCase(
        training_log_repo=training_log_repo,
        resolver=ExerciseCatalogResolver(exercises_repo),
    )


# =============================================================================
# Authentication Providers
# =============================================================================


def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Get the current authenticated user ID.

    Verifies the Supabase access token locally when SUPABASE_JWT_SECRET is
    set, otherwise asks Supabase Auth.

    Returns:
        str: User ID

    Raises:
        HTTPException: 401 if not authenticated
    """
    client = None if settings.supabase_jwt_secret else get_supabase_client()
    return authenticate_request(authorization, settings, client)
