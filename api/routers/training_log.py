"""
Training log router.

Parses free-text strength training logs into structured exercises and,
on request, stores them as a training session.

Endpoints:
- POST /training-log/parse: Parse (and optionally persist) a training log
- OPTIONS /training-log/parse: CORS preflight without a body
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse, Response

from api.deps import (
    get_current_user,
    get_parsing_orchestrator,
    get_persist_training_log_use_case,
    get_vocabulary,
)
from api.schemas.training_log import (
    ErrorResponse,
    TrainingLogParseRequest,
    TrainingLogParseResponse,
)
from application.use_cases import PersistTrainingLogUseCase
from backend.core.training_report import render_training_markdown
from backend.core.vocabulary import ExerciseVocabulary
from backend.services.parsing_orchestrator import ParsingOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/training-log",
    tags=["Training Log"],
)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


def _error(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@router.options("/parse", include_in_schema=False)
def parse_training_log_preflight() -> Response:
    """Answer a plain OPTIONS request with permissive CORS headers and no body."""
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post(
    "/parse",
    response_model=TrainingLogParseResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "raw_text missing or empty"},
        401: {"description": "Missing or invalid credentials"},
        500: {"model": ErrorResponse, "description": "Parsing or session save failed"},
        503: {"model": ErrorResponse, "description": "Persistence requested without a database"},
    },
)
def parse_training_log(
    request: Optional[TrainingLogParseRequest] = Body(default=None),
    user_id: str = Depends(get_current_user),
    orchestrator: ParsingOrchestrator = Depends(get_parsing_orchestrator),
    persist_use_case: Optional[PersistTrainingLogUseCase] = Depends(get_persist_training_log_use_case),
    vocabulary: ExerciseVocabulary = Depends(get_vocabulary),
):
    """
    Parse a free-text training log.

    Lines that cannot be read produce warnings; the remaining lines still
    parse. With `persist: true` the session is stored and its ids returned.
    """
    if request is None or not request.raw_text:
        return _error(400, "raw_text is required")

    if request.persist and persist_use_case is None:
        logger.warning("Persist requested but Supabase is not configured")
        return _error(503, "Database not available. Supabase credentials not configured.")

    session_date = request.session_date or datetime.now(timezone.utc).date()

    try:
        orchestrated = orchestrator.parse_with_mode(request.raw_text, use_ai=request.use_ai)
        result = orchestrated.result
        logger.info(
            f"Parsed training log for user {user_id}: {len(result.exercises)} exercises, "
            f"{len(result.warnings)} warnings, mode={orchestrated.mode.value}"
        )

        persisted = None
        if request.persist:
            # Sets matched_exercise_id on the exercises it stores
            persisted = persist_use_case.execute(
                result,
                raw_text=request.raw_text,
                user_id=user_id,
                session_date=session_date,
                training_type=request.training_type,
            )
            if not persisted.success:
                return _error(500, persisted.error or "Failed to save training session", persisted.details)

        response = TrainingLogParseResponse(
            exercises=result.exercises,
            session_meta=result.session_meta,
            warnings=result.warnings,
        )
        if persisted is not None:
            response.training_session_id = persisted.training_session_id
            response.exercise_session_id = persisted.exercise_session_id

        if request.include_markdown:
            response.formatted_markdown = render_training_markdown(result, session_date, vocabulary)

        return response
    except Exception as e:
        logger.exception(f"Training parsing failed for user {user_id}")
        return _error(500, "Training parsing failed", str(e))
