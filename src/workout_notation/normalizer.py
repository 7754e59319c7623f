"""Map free-typed exercise names onto catalog entries."""
from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel

from workout_notation.catalog import AliasIndex, ExerciseDefinition, default_alias_index, fold

logger = logging.getLogger(__name__)

# Aliases shorter than this never take part in substring matching
# ("bp" would otherwise match inside "bpm", "run" inside "crunches").
MIN_SUBSTRING_ALIAS_LENGTH = 4


class NormalizedExercise(BaseModel):
    """Result of name normalization"""
    canonical_name: str
    display_name: str
    display_name_local: str
    matched: bool
    definition: Optional[ExerciseDefinition] = None

    @classmethod
    def from_definition(cls, definition: ExerciseDefinition) -> "NormalizedExercise":
        return cls(
            canonical_name=definition.canonical_name,
            display_name=definition.display_name,
            display_name_local=definition.display_name_local,
            matched=True,
            definition=definition,
        )

    @classmethod
    def unmatched(cls, text: str) -> "NormalizedExercise":
        name = text.strip()
        return cls(
            canonical_name=name,
            display_name=name,
            display_name_local=name,
            matched=False,
        )


class ExerciseNameNormalizer:
    """Resolve input text to a catalog entry, first matching strategy wins.

    1. exact alias lookup
    2. substring containment against aliases of at least 4 characters
    3. multi-word token overlap
    4. unmatched fallback (input returned verbatim)
    """

    def __init__(self, index: AliasIndex | None = None):
        self.index = index if index is not None else default_alias_index()

    def normalize(self, text: str) -> NormalizedExercise:
        normalized = fold(text)
        if not normalized:
            return NormalizedExercise.unmatched(text)

        definition = (
            self.index.lookup(normalized)
            or self._match_substring(normalized)
            or self._match_words(normalized)
        )
        if definition is None:
            logger.debug(f"No catalog match for exercise name {text!r}")
            return NormalizedExercise.unmatched(text)
        return NormalizedExercise.from_definition(definition)

    def _match_substring(self, normalized: str) -> Optional[ExerciseDefinition]:
        for alias, definition in self.index.items():
            if len(alias) < MIN_SUBSTRING_ALIAS_LENGTH:
                continue
            if alias in normalized or normalized in alias:
                return definition
        return None

    def _match_words(self, normalized: str) -> Optional[ExerciseDefinition]:
        tokens = normalized.split()
        if len(tokens) < 2:
            return None
        input_words = set(tokens)
        for alias, definition in self.index.items():
            alias_words = set(alias.split())
            if len(input_words & alias_words) >= min(2, len(alias_words)):
                return definition
        return None
