"""Workout notation parsers."""
from .models import ParsedExercise, ParsedSet, ParsedWorkout, Side
from .locales import LOCALES, LocaleVocabulary, vocabulary_for
from .set_notation import (
    NotationRule,
    SetNotationParser,
    build_notation_rules,
    default_set_parser,
    normalize_token,
    parse_token,
)
from .text_parser import (
    PLACEHOLDER_EXERCISE_NAME,
    WorkoutTextParser,
    default_text_parser,
    parse_workout_text,
)

__all__ = [
    "LOCALES",
    "LocaleVocabulary",
    "NotationRule",
    "PLACEHOLDER_EXERCISE_NAME",
    "ParsedExercise",
    "ParsedSet",
    "ParsedWorkout",
    "SetNotationParser",
    "Side",
    "WorkoutTextParser",
    "build_notation_rules",
    "default_set_parser",
    "default_text_parser",
    "normalize_token",
    "parse_token",
    "parse_workout_text",
    "vocabulary_for",
]
