"""
Alias Index

Case-folded lookup table from every known spelling of an exercise to its
catalog definition. Built once from a validated list of definitions and never
mutated afterwards, so a single instance can be shared across threads.
"""

import logging
from functools import lru_cache
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .exercises import EXERCISES_DATABASE
from .models import ExerciseCategory, ExerciseDefinition

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when the exercise catalog is malformed."""


def fold(text: str) -> str:
    """Case-fold and collapse whitespace for index keys"""
    return " ".join(text.lower().split())


class AliasIndex:
    """Read-only alias → definition mapping with catalog helpers"""

    def __init__(self, definitions: Tuple[ExerciseDefinition, ...], entries: Dict[str, ExerciseDefinition]):
        self._definitions = definitions
        self._entries = entries

    @classmethod
    def build(cls, definitions: Iterable[ExerciseDefinition]) -> "AliasIndex":
        """
        Validate definitions and register their names.

        Registers, case-folded, the canonical name, both display names and
        every alias. When two definitions share a key, the one declared later
        owns it.

        Raises:
            CatalogError: On duplicate or blank ids, or blank canonical names.
        """
        definitions = tuple(definitions)
        seen_ids = set()
        for definition in definitions:
            if not definition.id.strip():
                raise CatalogError(f"Exercise '{definition.canonical_name}' has a blank id")
            if definition.id in seen_ids:
                raise CatalogError(f"Duplicate exercise id: {definition.id}")
            if not definition.canonical_name.strip():
                raise CatalogError(f"Exercise '{definition.id}' has a blank canonical name")
            seen_ids.add(definition.id)

        entries: Dict[str, ExerciseDefinition] = {}
        for definition in definitions:
            names = (
                definition.canonical_name,
                definition.display_name,
                definition.display_name_local,
                *definition.aliases,
            )
            for name in names:
                key = fold(name)
                if not key:
                    continue
                previous = entries.get(key)
                if previous is not None and previous.id != definition.id:
                    logger.debug(f"Alias '{key}' moved from {previous.id} to {definition.id}")
                entries[key] = definition

        logger.debug(f"Alias index built: {len(definitions)} exercises, {len(entries)} keys")
        return cls(definitions, entries)

    def lookup(self, text: str) -> Optional[ExerciseDefinition]:
        """Exact case-insensitive lookup"""
        return self._entries.get(fold(text))

    def items(self) -> Iterator[Tuple[str, ExerciseDefinition]]:
        """Registered (key, definition) pairs in index iteration order"""
        return iter(self._entries.items())

    def aliases(self) -> List[str]:
        return list(self._entries)

    @property
    def definitions(self) -> Tuple[ExerciseDefinition, ...]:
        return self._definitions

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, text: str) -> bool:
        return fold(text) in self._entries

    def get_by_canonical_name(self, name: str) -> Optional[ExerciseDefinition]:
        key = fold(name)
        for definition in self._definitions:
            if fold(definition.canonical_name) == key:
                return definition
        return None

    def get_by_category(self, category: ExerciseCategory | str) -> List[ExerciseDefinition]:
        value = ExerciseCategory(category).value
        return [d for d in self._definitions if d.category == value]

    def search(self, query: str, limit: int = 10) -> List[ExerciseDefinition]:
        """
        Autocomplete search over the catalog.

        A definition matches when the query is a substring of any alias, either
        display name, or the canonical name. Results keep declaration order.
        """
        q = fold(query)
        if not q or limit <= 0:
            return []

        results: List[ExerciseDefinition] = []
        seen = set()
        for definition in self._definitions:
            if definition.id in seen:
                continue
            names = (
                definition.canonical_name,
                definition.display_name,
                definition.display_name_local,
                *definition.aliases,
            )
            if any(q in fold(name) for name in names):
                results.append(definition)
                seen.add(definition.id)
                if len(results) >= limit:
                    break
        return results


@lru_cache(maxsize=1)
def default_alias_index() -> AliasIndex:
    """Process-wide index over the bundled catalog, built on first use"""
    return AliasIndex.build(EXERCISES_DATABASE)
