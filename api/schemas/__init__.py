"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- training_log: Training-log parse request/response models
"""

from api.schemas.training_log import (
    ErrorResponse,
    TrainingLogParseRequest,
    TrainingLogParseResponse,
)

__all__ = [
    "ErrorResponse",
    "TrainingLogParseRequest",
    "TrainingLogParseResponse",
]
