"""
Shared pytest fixtures.

The `app` fixture builds a fresh application with test settings, a fixed
authenticated user and no database or AI gateway. Tests opt into
persistence with `persisting_app`, which wires in-memory fakes.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import (
    get_ai_fallback_parser,
    get_current_user,
    get_exercises_repo,
    get_supabase_client,
    get_training_log_repo,
)
from backend.core.line_parser import DeterministicLineParser
from backend.core.vocabulary import ExerciseVocabulary, get_default_vocabulary
from backend.main import create_app
from backend.services.ai_fallback_parser import AiFallbackParser
from backend.settings import Settings
from tests.fakes import FakeExercisesRepository, FakeTrainingLogRepository

TEST_USER_ID = "user-test-123"


@pytest.fixture
def vocabulary() -> ExerciseVocabulary:
    return get_default_vocabulary()


@pytest.fixture
def line_parser(vocabulary) -> DeterministicLineParser:
    return DeterministicLineParser(vocabulary)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def exercises_repo() -> FakeExercisesRepository:
    return FakeExercisesRepository()


@pytest.fixture
def training_log_repo() -> FakeTrainingLogRepository:
    return FakeTrainingLogRepository()


@pytest.fixture
def app(test_settings, vocabulary):
    application = create_app(settings=test_settings)
    application.dependency_overrides[get_current_user] = lambda: TEST_USER_ID
    application.dependency_overrides[get_supabase_client] = lambda: None
    application.dependency_overrides[get_ai_fallback_parser] = lambda: AiFallbackParser(vocabulary)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def persisting_app(app, exercises_repo, training_log_repo):
    app.dependency_overrides[get_exercises_repo] = lambda: exercises_repo
    app.dependency_overrides[get_training_log_repo] = lambda: training_log_repo
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def persisting_client(persisting_app) -> TestClient:
    return TestClient(persisting_app)
