"""
Training Log Schemas.

Schemas for:
- TrainingLogParseRequest: Request body for POST /training-log/parse
- TrainingLogParseResponse: Preview / persisted parse result
- ErrorResponse: `{error, details?}` body of 400/500/503 responses
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models import ParsedExercise, SessionMeta


class TrainingLogParseRequest(BaseModel):
    """
    Request body for POST /training-log/parse.

    `raw_text` is optional at the schema level so a missing value is reported
    as a 400 by the handler rather than as a 422 validation error.
    """
    raw_text: Optional[str] = Field(
        default=None,
        description="Free-text training log, one exercise per line",
        max_length=20000,
    )
    training_type: str = Field(
        default="strength",
        description="Workout category stored with the session",
    )
    persist: bool = Field(default=False, description="Store the parsed session")
    use_ai: bool = Field(default=False, description="Always run the AI parser")
    session_date: Optional[date] = Field(
        default=None,
        description="Session date; defaults to today (UTC)",
    )
    include_markdown: bool = Field(
        default=False,
        description="Add a Markdown training report to the response",
    )


class TrainingLogParseResponse(BaseModel):
    """Response body for POST /training-log/parse."""
    success: bool = True
    exercises: List[ParsedExercise] = Field(default_factory=list)
    session_meta: SessionMeta
    warnings: List[str] = Field(default_factory=list)
    formatted_markdown: Optional[str] = None
    training_session_id: Optional[str] = None
    exercise_session_id: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error body returned by the training-log endpoint."""
    error: str
    details: Optional[str] = None
