"""
API package for the Training Log API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request/response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_exercises_repo,
    get_training_log_repo,
    get_vocabulary,
    get_line_parser,
    get_ai_fallback_parser,
    get_parsing_orchestrator,
    get_persist_training_log_use_case,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    # Repositories
    "get_exercises_repo",
    "get_training_log_repo",
    # Parsing
    "get_vocabulary",
    "get_line_parser",
    "get_ai_fallback_parser",
    "get_parsing_orchestrator",
    # Use cases
    "get_persist_training_log_use_case",
    # Authentication
    "get_current_user",
]
