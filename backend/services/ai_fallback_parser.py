"""
AI fallback parser for training logs the deterministic grammar cannot read.

Calls an OpenAI-compatible chat-completions gateway with a forced function
tool and converts the validated tool arguments into a ParseResult. Every
failure degrades to None; the caller keeps its deterministic result.
"""
import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from backend.ai.client_factory import AIClientFactory
from backend.core.line_parser import make_parsed_exercise
from backend.core.session_summary import build_parse_result
from backend.core.vocabulary import ExerciseVocabulary
from backend.settings import Settings
from domain.models import (
    DEFAULT_RPE,
    MAX_REPS,
    MAX_SETS,
    MAX_WEIGHT_KG,
    ParsedExercise,
    ParseResult,
    SetEntry,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "google/gemini-3-flash-preview"
DEFAULT_TIMEOUT_SECONDS = 30.0

TOOL_NAME = "parse_training_log"

AI_PARSER_SYSTEM_PROMPT = """You are a strength-training expert. Parse training logs into structured data.

Rules:
- Recognize exercise names despite typos ("goblet squad" -> "Goblet Squat", "kurzanhtel" -> "Kurzhantel").
- "3x 8x" or "3x8" means 3 sets of 8 repetitions.
- "je Seite" / "pro Seite" means unilateral: the given weight is per arm/leg.
- "KH" means Kurzhantel (dumbbell), "LH" means Langhantel (barbell).
- If no RPE is given, use 7.
- Weights are always in kg.
- If one line names several exercises ("Bizeps und Trizeps"), split them."""

PARSE_TRAINING_LOG_TOOL: Dict[str, Any] = {
    "type": "function",
    "function": {
        "name": TOOL_NAME,
        "description": "Return the parsed exercises as structured data",
        "parameters": {
            "type": "object",
            "properties": {
                "exercises": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string", "description": "Normalized exercise name"},
                            "sets": {"type": "number", "description": "Number of sets"},
                            "reps": {"type": "number", "description": "Repetitions per set"},
                            "weight_kg": {"type": "number", "description": "Weight in kg"},
                            "rpe": {"type": "number", "description": "RPE 1-10, default 7"},
                            "notes": {"type": "string", "description": "Additional notes"},
                        },
                        "required": ["name", "sets", "reps", "weight_kg"],
                    },
                },
            },
            "required": ["exercises"],
        },
    },
}

TOOL_CHOICE: Dict[str, Any] = {"type": "function", "function": {"name": TOOL_NAME}}


class AiExerciseItem(BaseModel):
    """One exercise as returned by the parse_training_log tool."""

    model_config = {"str_strip_whitespace": True}

    name: str = Field(..., min_length=1)
    sets: int = Field(..., ge=1, le=MAX_SETS)
    reps: int = Field(..., ge=1, le=MAX_REPS)
    weight_kg: float = Field(..., ge=0, le=MAX_WEIGHT_KG, allow_inf_nan=False)
    rpe: Optional[float] = Field(default=None, ge=1, le=10, allow_inf_nan=False)
    notes: Optional[str] = None


class AiParsePayload(BaseModel):
    """Arguments of the parse_training_log tool call."""

    exercises: List[AiExerciseItem] = Field(default_factory=list)


class AiFallbackParser:
    """
    Text-to-structured-data fallback backed by an LLM gateway.

    The client is injected so tests can pass a mock; `from_settings` builds
    the real one. Without a client every call returns None.
    """

    def __init__(
        self,
        vocabulary: ExerciseVocabulary,
        client: Optional[Any] = None,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._vocabulary = vocabulary
        self._client = client
        self._model = model
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings, vocabulary: ExerciseVocabulary) -> "AiFallbackParser":
        """Build a parser whose client is configured from settings."""
        client = None
        if settings.ai_gateway_api_key:
            client = AIClientFactory.create_openai_client(settings=settings)
        else:
            logger.info("AI_GATEWAY_API_KEY not set, AI fallback parsing disabled")
        return cls(
            vocabulary=vocabulary,
            client=client,
            model=settings.ai_parser_model,
            timeout=settings.ai_parser_timeout_seconds,
        )

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def parse(self, raw_text: str) -> Optional[ParseResult]:
        """
        Parse a training log through the AI gateway.

        Returns:
            ParseResult with at least one exercise, or None when the gateway
            is unavailable, fails, or returns nothing usable.
        """
        if self._client is None:
            logger.warning("AI fallback requested but no AI client is configured")
            return None

        arguments = self._request_tool_arguments(raw_text)
        if arguments is None:
            return None

        payload = self._decode_payload(arguments)
        if payload is None:
            return None

        exercises = [self._to_parsed_exercise(item) for item in payload.exercises]
        logger.info(f"AI fallback parsed {len(exercises)} exercises")
        return build_parse_result(exercises)

    def _request_tool_arguments(self, raw_text: str) -> Optional[str]:
        """Call the gateway and return the raw tool-call arguments."""
        from openai import (
            APIConnectionError,
            APIError,
            APIStatusError,
            APITimeoutError,
        )

        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": AI_PARSER_SYSTEM_PROMPT},
                    {"role": "user", "content": f"Parse this training log:\n\n{raw_text}"},
                ],
                tools=[PARSE_TRAINING_LOG_TOOL],
                tool_choice=TOOL_CHOICE,
                timeout=self._timeout,
            )
        except APIStatusError as e:
            if e.status_code == 429:
                logger.warning("AI gateway rate limited the training-log parse")
            elif e.status_code == 402:
                logger.warning("AI gateway requires payment, skipping AI parse")
            else:
                logger.error(f"AI gateway error: HTTP {e.status_code}")
            return None
        except APITimeoutError:
            logger.warning(f"AI gateway timed out after {self._timeout}s")
            return None
        except APIConnectionError as e:
            logger.error(f"AI gateway connection failed: {e}")
            return None
        except APIError as e:
            logger.error(f"AI gateway call failed: {e}")
            return None

        choices = getattr(response, "choices", None) or []
        message = choices[0].message if choices else None
        tool_calls = getattr(message, "tool_calls", None) or []
        if not tool_calls:
            logger.warning("No tool call in AI gateway response")
            return None

        return tool_calls[0].function.arguments

    def _decode_payload(self, arguments: str) -> Optional[AiParsePayload]:
        """Decode and validate tool arguments; None on any violation."""
        try:
            data = json.loads(arguments)
        except (TypeError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to decode AI tool arguments as JSON: {e}")
            return None

        try:
            payload = AiParsePayload.model_validate(data)
        except ValidationError as e:
            logger.warning(f"AI tool arguments failed validation: {e.error_count()} errors")
            return None

        if not payload.exercises:
            logger.warning("No exercises in AI response")
            return None
        return payload

    def _to_parsed_exercise(self, item: AiExerciseItem) -> ParsedExercise:
        rpe = item.rpe if item.rpe is not None else DEFAULT_RPE
        entry = SetEntry(reps=item.reps, weight=item.weight_kg, rpe=rpe)
        return make_parsed_exercise(
            self._vocabulary,
            raw_name=item.name,
            sets=[entry] * item.sets,
            notes=item.notes or None,
        )
