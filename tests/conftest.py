"""
Test fixtures for workout-notation.

Provides a minimal substitute catalog, parser instances and a FastAPI test
client. Everything is offline and deterministic.
"""

import sys
from pathlib import Path
from typing import List

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_notation...`
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from workout_notation.catalog import AliasIndex, ExerciseCategory, ExerciseDefinition
from workout_notation.main import app
from workout_notation.parsers import SetNotationParser, WorkoutTextParser


# ---------------------------------------------------------------------------
# Catalog Fixtures
# ---------------------------------------------------------------------------


def make_definition(id: str, canonical_name: str, aliases=(), **kwargs) -> ExerciseDefinition:
    """Build a definition with display names defaulting to the canonical name."""
    return ExerciseDefinition(
        id=id,
        canonical_name=canonical_name,
        display_name=kwargs.pop("display_name", canonical_name),
        display_name_local=kwargs.pop("display_name_local", canonical_name),
        aliases=tuple(aliases),
        category=kwargs.pop("category", ExerciseCategory.CHEST),
        **kwargs,
    )


@pytest.fixture
def mini_definitions() -> List[ExerciseDefinition]:
    return [
        make_definition("bench", "Bench press", ("bench", "bp", "жим лежа")),
        make_definition(
            "pushups", "Push-ups", ("pushups", "push ups", "отжимания"), is_bodyweight=True,
        ),
        make_definition(
            "squat", "Squat", ("squats", "back squat"), category=ExerciseCategory.LEGS,
        ),
    ]


@pytest.fixture
def mini_index(mini_definitions) -> AliasIndex:
    return AliasIndex.build(mini_definitions)


@pytest.fixture
def set_parser() -> SetNotationParser:
    return SetNotationParser(["en", "ru"])


@pytest.fixture
def text_parser(set_parser) -> WorkoutTextParser:
    """Parser over the bundled catalog with both locales enabled."""
    return WorkoutTextParser(set_parser=set_parser)


# ---------------------------------------------------------------------------
# Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
