"""
Unit tests for AiFallbackParser.

The OpenAI client is a MagicMock; no network access.
"""
import pytest
from unittest.mock import patch

from backend.services.ai_fallback_parser import (
    AiFallbackParser,
    PARSE_TRAINING_LOG_TOOL,
    TOOL_CHOICE,
)
from backend.settings import Settings
from domain.models import SplitType
from tests.fakes.ai_client import (
    connection_error,
    exercises_payload,
    make_ai_client,
    status_error,
    text_only_response,
    timeout_error,
    tool_call_response,
)


def _parser(vocabulary, client):
    return AiFallbackParser(vocabulary, client=client, model="test-model", timeout=5.0)


@pytest.mark.unit
class TestSuccessfulParse:
    """Tests for valid tool-call payloads."""

    def test_expands_sets_and_defaults_rpe(self, vocabulary):
        client = make_ai_client(tool_call_response(exercises_payload(
            {"name": "bench", "sets": 3, "reps": 8, "weight_kg": 60},
        )))

        result = _parser(vocabulary, client).parse("bänkdrücken 3 mal 8 mit 60")

        assert result is not None
        exercise = result.exercises[0]
        assert exercise.raw_name == "bench"
        assert exercise.normalized_name == "Bankdrücken"
        assert len(exercise.sets) == 3
        assert all(s.rpe == 7.0 and s.reps == 8 and s.weight == 60.0 for s in exercise.sets)
        assert result.warnings == []

    def test_session_meta_is_computed_not_copied(self, vocabulary):
        payload = exercises_payload({"name": "Latzug", "sets": 2, "reps": 10, "weight_kg": 50, "rpe": 8})
        payload["session_meta"] = {"total_volume_kg": 99999, "split_type": "legs"}
        client = make_ai_client(tool_call_response(payload))

        result = _parser(vocabulary, client).parse("latzug zweimal zehn 50")

        assert result.session_meta.total_volume_kg == 1000.0
        assert result.session_meta.split_type == SplitType.PULL
        assert result.exercises[0].sets[0].rpe == 8.0

    def test_notes_are_kept(self, vocabulary):
        client = make_ai_client(tool_call_response(exercises_payload(
            {"name": "Rudern", "sets": 1, "reps": 12, "weight_kg": 22.5, "notes": "je Seite"},
        )))

        result = _parser(vocabulary, client).parse("KH rudern 12x 22,5 je Seite")

        assert result.exercises[0].notes == "je Seite"

    def test_request_forces_the_tool(self, vocabulary):
        client = make_ai_client(tool_call_response(exercises_payload(
            {"name": "Dips", "sets": 1, "reps": 10, "weight_kg": 0},
        )))

        _parser(vocabulary, client).parse("dips 10")

        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["tools"] == [PARSE_TRAINING_LOG_TOOL]
        assert kwargs["tool_choice"] == TOOL_CHOICE
        assert kwargs["timeout"] == 5.0
        assert "dips 10" in kwargs["messages"][-1]["content"]


@pytest.mark.unit
class TestDegradesToNone:
    """Every failure mode returns None and never retries."""

    @pytest.mark.parametrize("status_code", [429, 402, 500, 503])
    def test_http_errors(self, vocabulary, status_code):
        client = make_ai_client(error=status_error(status_code))

        assert _parser(vocabulary, client).parse("something") is None
        assert client.chat.completions.create.call_count == 1

    def test_timeout(self, vocabulary):
        client = make_ai_client(error=timeout_error())
        assert _parser(vocabulary, client).parse("something") is None

    def test_connection_error(self, vocabulary):
        client = make_ai_client(error=connection_error())
        assert _parser(vocabulary, client).parse("something") is None

    def test_no_client(self, vocabulary):
        assert AiFallbackParser(vocabulary).parse("something") is None

    def test_no_tool_call(self, vocabulary):
        client = make_ai_client(text_only_response())
        assert _parser(vocabulary, client).parse("something") is None

    def test_invalid_json(self, vocabulary):
        client = make_ai_client(tool_call_response("{not json"))
        assert _parser(vocabulary, client).parse("something") is None

    def test_empty_exercises(self, vocabulary):
        client = make_ai_client(tool_call_response(exercises_payload()))
        assert _parser(vocabulary, client).parse("something") is None

    @pytest.mark.parametrize(
        "item",
        [
            {"name": "Dips", "sets": 0, "reps": 10, "weight_kg": 0},
            {"name": "Dips", "sets": 3, "reps": 10, "weight_kg": -5},
            {"name": "Dips", "sets": 3, "reps": 10, "weight_kg": 5, "rpe": 12},
            {"name": "", "sets": 3, "reps": 10, "weight_kg": 5},
            {"sets": 3, "reps": 10, "weight_kg": 5},
            {"name": "Dips", "sets": 10**20, "reps": 10, "weight_kg": 5},
            {"name": "Dips", "sets": 3, "reps": 10**6, "weight_kg": 5},
            {"name": "Dips", "sets": 3, "reps": 10, "weight_kg": 1e9},
        ],
    )
    def test_schema_violations(self, vocabulary, item):
        client = make_ai_client(tool_call_response(exercises_payload(item)))
        assert _parser(vocabulary, client).parse("something") is None

    def test_non_finite_weight(self, vocabulary):
        arguments = '{"exercises": [{"name": "Dips", "sets": 3, "reps": 10, "weight_kg": Infinity}]}'
        client = make_ai_client(tool_call_response(arguments))
        assert _parser(vocabulary, client).parse("something") is None


@pytest.mark.unit
class TestFromSettings:
    """Tests for client construction from settings."""

    def test_without_key_has_no_client(self, vocabulary):
        settings = Settings(environment="test", ai_gateway_api_key=None, _env_file=None)
        parser = AiFallbackParser.from_settings(settings, vocabulary)
        assert parser.enabled is False

    def test_with_key_builds_client(self, vocabulary):
        settings = Settings(environment="test", ai_gateway_api_key="gw-key", _env_file=None)
        with patch("backend.services.ai_fallback_parser.AIClientFactory.create_openai_client") as factory:
            parser = AiFallbackParser.from_settings(settings, vocabulary)

        factory.assert_called_once_with(settings=settings)
        assert parser.enabled is True
