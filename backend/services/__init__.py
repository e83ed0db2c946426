"""Backend services for the Training Log API."""

from backend.services.ai_fallback_parser import AiFallbackParser
from backend.services.parsing_orchestrator import (
    OrchestratedParse,
    ParseMode,
    ParsingOrchestrator,
)

__all__ = [
    "AiFallbackParser",
    "OrchestratedParse",
    "ParseMode",
    "ParsingOrchestrator",
]
