"""
Unit tests for backend/main.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import patch

from backend.main import create_app, _init_sentry, _configure_cors, _log_feature_flags
from backend.settings import Settings


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self):
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self):
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_get_settings.return_value = Settings(environment="test", _env_file=None)

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))

        assert app.title == "Training Log API"
        assert app.version == "1.0.0"

    def test_routes_are_registered(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        paths = {route.path for route in app.routes}

        assert "/health" in paths
        assert "/training-log/parse" in paths


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        settings = Settings(sentry_dsn=None, _env_file=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self):
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="test",
            _env_file=None
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once_with(
                dsn="https://test@sentry.io/123",
                environment="test",
                traces_sample_rate=0.1,
                profiles_sample_rate=0.1,
            )


@pytest.mark.unit
class TestConfigureCors:
    """Test CORS configuration."""

    def test_configure_cors_adds_middleware(self):
        app = FastAPI()
        initial_middleware_count = len(app.user_middleware)

        _configure_cors(app, Settings(_env_file=None, cors_allowed_origins="*"))

        assert len(app.user_middleware) == initial_middleware_count + 1

    def test_wildcard_disables_credentials(self):
        app = FastAPI()
        _configure_cors(app, Settings(_env_file=None, cors_allowed_origins="*"))

        assert app.user_middleware[0].kwargs["allow_credentials"] is False

    def test_explicit_origins_allow_credentials(self):
        app = FastAPI()
        _configure_cors(app, Settings(_env_file=None, cors_allowed_origins="https://app.example"))

        options = app.user_middleware[0].kwargs
        assert options["allow_origins"] == ["https://app.example"]
        assert options["allow_credentials"] is True


@pytest.mark.unit
class TestLogFeatureFlags:
    """Test startup logging of optional integrations."""

    def test_logs_ai_disabled(self, caplog):
        settings = Settings(ai_gateway_api_key=None, _env_file=None)

        with caplog.at_level("INFO"):
            _log_feature_flags(settings)

        assert "AI fallback parsing disabled" in caplog.text

    def test_logs_ai_enabled_with_model(self, caplog):
        settings = Settings(ai_gateway_api_key="gw-key", ai_parser_model="test-model", _env_file=None)

        with caplog.at_level("INFO"):
            _log_feature_flags(settings)

        assert "AI fallback parsing enabled (model: test-model)" in caplog.text

    def test_warns_without_database(self, caplog):
        settings = Settings(supabase_url=None, _env_file=None)

        with caplog.at_level("WARNING"):
            _log_feature_flags(settings)

        assert "Supabase not configured" in caplog.text


@pytest.mark.integration
class TestAppIntegration:
    """Integration tests for the created app."""

    def test_cors_allows_requests(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        client = TestClient(app)

        response = client.get("/health", headers={"Origin": "http://localhost:3000"})

        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers

    def test_create_multiple_independent_apps(self):
        app1 = create_app(settings=Settings(environment="test", _env_file=None))
        app2 = create_app(settings=Settings(environment="production", _env_file=None))

        assert app1 is not app2
