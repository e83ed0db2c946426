"""
Exercise vocabulary for name normalization and muscle-group inference.

The vocabulary is an immutable lookup table. The default table lives in
shared/dictionaries/exercise_vocabulary.yaml and is loaded once per process;
callers receive it by injection so tests can pass a fixture vocabulary.
"""
import logging
import pathlib
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import yaml

logger = logging.getLogger(__name__)

ROOT = pathlib.Path(__file__).resolve().parents[2]
DEFAULT_VOCABULARY_PATH = ROOT / "shared/dictionaries/exercise_vocabulary.yaml"

UNKNOWN_MUSCLE_GROUP = "other"


def lookup_key(name: str) -> str:
    """Lowercase, trim and collapse internal whitespace."""
    return " ".join(name.lower().split())


def title_case(name: str) -> str:
    """Title-case every whitespace-separated token ("bench  PRESS" -> "Bench Press")."""
    titled = " ".join(token.capitalize() for token in name.split())
    # A few characters (e.g. "ŉ") title-case into forms that change again
    for _ in range(3):
        again = " ".join(token.capitalize() for token in titled.split())
        if again == titled:
            break
        titled = again
    return titled


class ExerciseVocabulary:
    """
    Name-normalization table plus canonical-name -> muscle-group sets.

    Pure lookup, no I/O after construction.

    Usage:
        vocabulary = ExerciseVocabulary(
            aliases={"bench": "Bankdrücken"},
            muscle_groups={"Bankdrücken": ["chest", "triceps", "front_delts"]},
        )
        vocabulary.normalize("  BENCH ")          # "Bankdrücken"
        vocabulary.normalize("goblet squat")      # "Goblet Squat"
        vocabulary.muscle_groups_for("bankdrücken")  # ["chest", "triceps", "front_delts"]
    """

    def __init__(
        self,
        aliases: Optional[Mapping[str, str]] = None,
        muscle_groups: Optional[Mapping[str, Sequence[str]]] = None,
        hints: Optional[Mapping[str, Sequence[str]]] = None,
        default_hints: Optional[Sequence[str]] = None,
    ):
        alias_table: Dict[str, str] = {}
        for alias, canonical in (aliases or {}).items():
            alias_table[lookup_key(alias)] = canonical

        muscle_table: Dict[str, Tuple[str, ...]] = {}
        for canonical, groups in (muscle_groups or {}).items():
            unique = tuple(dict.fromkeys(g for g in groups if g))
            muscle_table[lookup_key(canonical)] = unique or (UNKNOWN_MUSCLE_GROUP,)

        # Canonical names map to themselves
        for canonical in list(alias_table.values()) + list(muscle_groups or {}):
            alias_table.setdefault(lookup_key(canonical), canonical)

        self._aliases: Mapping[str, str] = MappingProxyType(alias_table)
        self._muscle_groups: Mapping[str, Tuple[str, ...]] = MappingProxyType(muscle_table)
        self._hints: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {lookup_key(k): tuple(v) for k, v in (hints or {}).items()}
        )
        self._default_hints: Tuple[str, ...] = tuple(default_hints or ())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExerciseVocabulary":
        """Build a vocabulary from the parsed YAML document."""
        return cls(
            aliases=data.get("aliases") or {},
            muscle_groups=data.get("muscle_groups") or {},
            hints=data.get("hints") or {},
            default_hints=data.get("default_hints") or [],
        )

    @classmethod
    def from_yaml(cls, path: pathlib.Path) -> "ExerciseVocabulary":
        """Load a vocabulary from a YAML file."""
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        vocabulary = cls.from_dict(data)
        logger.info(
            f"Loaded exercise vocabulary from {path.name}: "
            f"{len(vocabulary._aliases)} aliases, {len(vocabulary._muscle_groups)} muscle entries"
        )
        return vocabulary

    def normalize(self, raw_name: str) -> str:
        """
        Map a colloquial or abbreviated name to its canonical form.

        Total: unknown names are title-cased token by token. Applying it
        twice gives the same result as applying it once.
        """
        canonical = self._aliases.get(lookup_key(raw_name))
        if canonical is not None:
            return canonical

        titled = title_case(raw_name)
        return self._aliases.get(lookup_key(titled), titled)

    def muscle_groups_for(self, normalized_name: str) -> List[str]:
        """Muscle groups for a canonical name; ["other"] when unknown."""
        groups = self._muscle_groups.get(lookup_key(normalized_name))
        return list(groups) if groups else [UNKNOWN_MUSCLE_GROUP]

    def hints_for(self, normalized_name: str) -> List[str]:
        """Technique cues for the markdown report."""
        return list(self._hints.get(lookup_key(normalized_name), self._default_hints))

    def is_known(self, name: str) -> bool:
        return lookup_key(name) in self._aliases


@lru_cache
def get_default_vocabulary() -> ExerciseVocabulary:
    """
    Get the process-wide default vocabulary.

    Loaded once from DEFAULT_VOCABULARY_PATH. Clear with
    get_default_vocabulary.cache_clear() in tests that patch the file.
    """
    return ExerciseVocabulary.from_yaml(DEFAULT_VOCABULARY_PATH)
