"""
Parsing orchestration: deterministic first, AI fallback when asked or needed.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from backend.core.line_parser import DeterministicLineParser
from backend.core.session_summary import build_parse_result
from backend.services.ai_fallback_parser import AiFallbackParser
from domain.models import ParseResult

logger = logging.getLogger(__name__)

AI_PARSED_WARNING = "parsing performed via AI"


class ParseMode(str, Enum):
    """Which path produced a ParseResult."""
    DETERMINISTIC_ONLY = "deterministic_only"
    AI_REQUESTED = "ai_requested"
    AI_FALLBACK_ON_EMPTY = "ai_fallback_on_empty"


@dataclass
class OrchestratedParse:
    """A finalized ParseResult plus how it was produced."""
    result: ParseResult
    mode: ParseMode
    ai_used: bool = False


class ParsingOrchestrator:
    """
    Combines the deterministic parser with the AI fallback.

    The deterministic parser always runs. The AI fallback runs when the
    caller requests it or when the deterministic parser found nothing; a
    non-empty AI result replaces the deterministic one.

    Usage:
        orchestrator = ParsingOrchestrator(line_parser, ai_parser)
        result = orchestrator.parse("Bankdrücken 4x10 80kg @7", use_ai=False)
    """

    def __init__(
        self,
        line_parser: DeterministicLineParser,
        ai_parser: Optional[AiFallbackParser] = None,
    ):
        self._line_parser = line_parser
        self._ai_parser = ai_parser

    def parse(self, raw_text: str, use_ai: bool = False) -> ParseResult:
        return self.parse_with_mode(raw_text, use_ai=use_ai).result

    def parse_with_mode(self, raw_text: str, use_ai: bool = False) -> OrchestratedParse:
        exercises, warnings = self._line_parser.parse(raw_text)
        primary_result = build_parse_result(exercises, warnings)

        if use_ai:
            mode = ParseMode.AI_REQUESTED
        elif primary_result.is_empty:
            mode = ParseMode.AI_FALLBACK_ON_EMPTY
        else:
            logger.info(f"Parsed {len(exercises)} exercises deterministically")
            return OrchestratedParse(result=primary_result, mode=ParseMode.DETERMINISTIC_ONLY)

        if self._ai_parser is None:
            logger.warning(f"AI parse wanted ({mode.value}) but no AI parser is configured")
            return OrchestratedParse(result=primary_result, mode=mode)

        ai_result = self._ai_parser.parse(raw_text)
        if ai_result is None or ai_result.is_empty:
            logger.warning(f"AI parse ({mode.value}) returned nothing, keeping deterministic result")
            return OrchestratedParse(result=primary_result, mode=mode)

        final = build_parse_result(
            ai_result.exercises,
            warnings=list(ai_result.warnings) + [AI_PARSED_WARNING],
        )
        logger.info(f"Parsed {len(final.exercises)} exercises via AI ({mode.value})")
        return OrchestratedParse(result=final, mode=mode, ai_used=True)
