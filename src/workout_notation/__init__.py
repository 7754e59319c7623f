"""Freeform workout notation parsing and exercise name canonicalization."""
from functools import lru_cache

from workout_notation.catalog import (
    AliasIndex,
    CatalogError,
    ExerciseCategory,
    ExerciseDefinition,
    default_alias_index,
)
from workout_notation.normalizer import ExerciseNameNormalizer, NormalizedExercise
from workout_notation.parsers import (
    ParsedExercise,
    ParsedSet,
    ParsedWorkout,
    SetNotationParser,
    Side,
    WorkoutTextParser,
    parse_token,
    parse_workout_text,
)
from workout_notation.services import (
    expand_sets,
    format_exercise_sets,
    format_set,
    inherit_weights,
)


@lru_cache(maxsize=1)
def _default_normalizer() -> ExerciseNameNormalizer:
    return ExerciseNameNormalizer(default_alias_index())


def normalize_exercise_name(text: str) -> NormalizedExercise:
    """Map arbitrary text to a catalog exercise, or return it unmatched."""
    return _default_normalizer().normalize(text)


def is_bodyweight_exercise(name: str) -> bool:
    definition = normalize_exercise_name(name).definition
    return definition.is_bodyweight if definition is not None else False


__all__ = [
    "AliasIndex",
    "CatalogError",
    "ExerciseCategory",
    "ExerciseDefinition",
    "ExerciseNameNormalizer",
    "NormalizedExercise",
    "ParsedExercise",
    "ParsedSet",
    "ParsedWorkout",
    "SetNotationParser",
    "Side",
    "WorkoutTextParser",
    "default_alias_index",
    "expand_sets",
    "format_exercise_sets",
    "format_set",
    "inherit_weights",
    "is_bodyweight_exercise",
    "normalize_exercise_name",
    "parse_token",
    "parse_workout_text",
]
