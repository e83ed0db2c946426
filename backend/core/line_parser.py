"""
Deterministic parser for free-text strength training logs.

Each line is expected to look like:

    Bankdrücken 4x10 80kg @7
    Kniebeugen 3 x 8 225 lbs RPE 8,5

The line is split into a leading exercise name and a remainder. The
remainder is tokenized and handed to a small recursive-descent parser for
the set clause:

    set_clause := INT TIMES INT NUMBER [UNIT] [rpe_suffix]
    rpe_suffix := ... ("@" | "RPE") NUMBER

A bad name and a bad set clause produce different warnings. The parser
never raises: anything it cannot read becomes a warning.
"""
import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from pydantic import ValidationError

from backend.core.vocabulary import ExerciseVocabulary
from domain.models import MAX_REPS, MAX_SETS, MAX_WEIGHT_KG, ParsedExercise, SetEntry, to_kg
from domain.models.set_entry import WeightUnit

logger = logging.getLogger(__name__)

NO_EXERCISES_WARNING = "no exercises recognized; expected format: '<exercise> 4x10 80kg @7'"

# Records are separated by newlines or semicolons
LINE_SEPARATOR_PATTERN = re.compile(r"[\r\n;]+")

# Letters (incl. umlauts/accents, excluding × and ÷), spaces and hyphens
NAME_PREFIX_PATTERN = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ\s-]+")

MIN_NAME_LENGTH = 2

COMMENT_BULLETS = ("•", "◦", "▪", "#", "//")
INSTRUCTIONAL_PREFIXES = (
    "tipp",
    "tip",
    "format",
    "beispiele",
    "beispiel",
    "example",
    "hinweise",
    "hinweis",
    "note",
)
INSTRUCTIONAL_PREFIX_PATTERN = re.compile(
    r"(?:" + "|".join(INSTRUCTIONAL_PREFIXES) + r")s?\b", re.IGNORECASE
)

KG_UNITS = {"kg", "kgs", "kilo", "kilos", "kilogramm", "kilogram", "kilograms"}
LB_UNITS = {"lb", "lbs", "pound", "pounds"}
TIMES_SYMBOLS = {"x", "×", "*"}
RPE_MARKERS = {"@", "rpe"}

_TOKEN_PATTERN = re.compile(
    r"(?P<number>\d+(?:[.,]\d+)?)"
    r"|(?P<word>[^\W\d_]+)"
    r"|(?P<symbol>\S)"
)

MIN_RPE = 1.0
MAX_RPE = 10.0


def line_not_recognized(line: str) -> str:
    return f"line not recognized: {line}"


def set_format_not_recognized(raw_name: str) -> str:
    return f"set format not recognized for: {raw_name}"


# =============================================================================
# Tokenizer
# =============================================================================


class TokenKind(str, Enum):
    """Lexical categories of the set-clause remainder."""
    NUMBER = "number"
    TIMES = "times"
    UNIT = "unit"
    RPE_MARKER = "rpe_marker"
    WORD = "word"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    value: Optional[float] = None
    is_integer: bool = False
    unit: Optional[WeightUnit] = None


def tokenize(text: str) -> List[Token]:
    """
    Split a set-clause remainder into tokens.

    Numbers accept "." or "," as decimal separator. Letters directly after a
    number form their own token, so "4x10" and "80kg" tokenize like
    "4 x 10" and "80 kg".
    """
    tokens: List[Token] = []
    for match in _TOKEN_PATTERN.finditer(text):
        if match.group("number"):
            raw = match.group("number")
            tokens.append(Token(
                kind=TokenKind.NUMBER,
                text=raw,
                value=float(raw.replace(",", ".")),
                is_integer=raw.isdigit(),
            ))
            continue

        raw = match.group("word") or match.group("symbol")
        lowered = raw.lower()
        if lowered in TIMES_SYMBOLS:
            tokens.append(Token(kind=TokenKind.TIMES, text=raw))
        elif lowered in KG_UNITS:
            tokens.append(Token(kind=TokenKind.UNIT, text=raw, unit="kg"))
        elif lowered in LB_UNITS:
            tokens.append(Token(kind=TokenKind.UNIT, text=raw, unit="lb"))
        elif lowered in RPE_MARKERS:
            tokens.append(Token(kind=TokenKind.RPE_MARKER, text=raw))
        elif match.group("word"):
            tokens.append(Token(kind=TokenKind.WORD, text=raw))
        else:
            tokens.append(Token(kind=TokenKind.SYMBOL, text=raw))
    return tokens


# =============================================================================
# Set clause parser
# =============================================================================


@dataclass(frozen=True)
class SetClause:
    """`<sets> x <reps> <weight> [unit] [@rpe]` as written by the user."""
    sets: int
    reps: int
    weight: float
    unit: WeightUnit = "kg"
    rpe: Optional[float] = None

    @property
    def weight_kg(self) -> float:
        return to_kg(self.weight, self.unit)

    def to_set_entries(self) -> List[SetEntry]:
        """Materialize `sets` identical straight sets."""
        entry = SetEntry(reps=self.reps, weight=self.weight_kg, rpe=self.rpe)
        return [entry] * self.sets


class SetClauseParser:
    """
    Recursive-descent parser over a token list.

    The clause may start at any number token; the first start position
    that yields a complete clause wins. Text after the clause is ignored.
    """

    def __init__(self, tokens: Sequence[Token]):
        self._tokens = list(tokens)
        self._pos = 0

    def parse(self) -> Optional[SetClause]:
        for start, token in enumerate(self._tokens):
            if token.kind is not TokenKind.NUMBER:
                continue
            self._pos = start
            clause = self._set_clause()
            if clause is not None:
                return clause
        return None

    def _peek(self) -> Optional[Token]:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _accept(self, kind: TokenKind) -> Optional[Token]:
        token = self._peek()
        if token is not None and token.kind is kind:
            self._pos += 1
            return token
        return None

    def _positive_integer(self, limit: int) -> Optional[int]:
        token = self._peek()
        if token is None or token.kind is not TokenKind.NUMBER or not token.is_integer:
            return None
        # Longer digit strings cannot be within the limit
        digits = token.text.lstrip("0") or "0"
        if len(digits) > len(str(limit)):
            return None
        value = int(digits)
        if not 1 <= value <= limit:
            return None
        self._pos += 1
        return value

    def _set_clause(self) -> Optional[SetClause]:
        sets = self._positive_integer(MAX_SETS)
        if sets is None or self._accept(TokenKind.TIMES) is None:
            return None

        reps = self._positive_integer(MAX_REPS)
        if reps is None:
            return None

        weight_token = self._accept(TokenKind.NUMBER)
        if weight_token is None:
            return None

        unit_token = self._accept(TokenKind.UNIT)
        unit: WeightUnit = unit_token.unit if unit_token else "kg"
        if not math.isfinite(weight_token.value) or to_kg(weight_token.value, unit) > MAX_WEIGHT_KG:
            return None

        valid, rpe = self._rpe_suffix()
        if not valid:
            return None

        return SetClause(sets=sets, reps=reps, weight=weight_token.value, unit=unit, rpe=rpe)

    def _rpe_suffix(self) -> Tuple[bool, Optional[float]]:
        """Find `@ <n>` / `RPE <n>` anywhere after the weight."""
        for i in range(self._pos, len(self._tokens) - 1):
            marker, value = self._tokens[i], self._tokens[i + 1]
            if marker.kind is TokenKind.RPE_MARKER and value.kind is TokenKind.NUMBER:
                if not MIN_RPE <= value.value <= MAX_RPE:
                    return False, None
                return True, value.value
        return True, None


def parse_set_clause(text: str) -> Optional[SetClause]:
    """Parse a set clause from the remainder of a log line."""
    return SetClauseParser(tokenize(text)).parse()


# =============================================================================
# Line parser
# =============================================================================


def split_lines(raw_text: str) -> List[str]:
    """Split raw text into trimmed, non-blank records."""
    return [line.strip() for line in LINE_SEPARATOR_PATTERN.split(raw_text or "") if line.strip()]


def is_commentary(line: str) -> bool:
    """Bullets and instructional text copied from the composer hints."""
    if line.startswith(COMMENT_BULLETS):
        return True
    return INSTRUCTIONAL_PREFIX_PATTERN.match(line) is not None


def make_parsed_exercise(
    vocabulary: ExerciseVocabulary,
    raw_name: str,
    sets: List[SetEntry],
    notes: Optional[str] = None,
) -> ParsedExercise:
    """Normalize the name and infer muscle groups for a list of sets."""
    normalized_name = vocabulary.normalize(raw_name)
    return ParsedExercise(
        raw_name=raw_name,
        normalized_name=normalized_name,
        sets=sets,
        muscle_groups=vocabulary.muscle_groups_for(normalized_name),
        notes=notes,
    )


class DeterministicLineParser:
    """
    Grammar-based parser for "<exercise> <sets>x<reps> <weight>[unit] [@rpe]" lines.

    Usage:
        parser = DeterministicLineParser(vocabulary)
        exercises, warnings = parser.parse("Bankdrücken 4x10 80kg @7")
    """

    def __init__(self, vocabulary: ExerciseVocabulary):
        self._vocabulary = vocabulary

    def parse(self, raw_text: str) -> Tuple[List[ParsedExercise], List[str]]:
        """
        Parse every record of a training log.

        Returns:
            (exercises in input order, warnings in input order)
        """
        exercises: List[ParsedExercise] = []
        warnings: List[str] = []

        for line in split_lines(raw_text):
            if is_commentary(line):
                continue

            exercise, warning = self.parse_line(line)
            if exercise is not None:
                exercises.append(exercise)
            if warning is not None:
                warnings.append(warning)

        if not exercises:
            warnings.append(NO_EXERCISES_WARNING)

        logger.debug(f"Deterministic parse: {len(exercises)} exercises, {len(warnings)} warnings")
        return exercises, warnings

    def parse_line(self, line: str) -> Tuple[Optional[ParsedExercise], Optional[str]]:
        """Parse a single non-blank, non-comment line."""
        name_match = NAME_PREFIX_PATTERN.match(line)
        raw_name = name_match.group(0).strip() if name_match else ""
        if len(raw_name) < MIN_NAME_LENGTH or not any(c.isalpha() for c in raw_name):
            return None, line_not_recognized(line)

        remainder = line[name_match.end():]
        clause = parse_set_clause(remainder)
        if clause is None:
            return None, set_format_not_recognized(raw_name)

        try:
            sets = clause.to_set_entries()
        except ValidationError as e:
            logger.debug(f"Rejected set clause for '{raw_name}': {e}")
            return None, set_format_not_recognized(raw_name)

        return make_parsed_exercise(self._vocabulary, raw_name, sets), None
