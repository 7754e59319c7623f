"""API routes for workout notation parsing."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from workout_notation import normalize_exercise_name
from workout_notation.catalog import ExerciseCategory, ExerciseDefinition, default_alias_index
from workout_notation.parsers import parse_workout_text
from workout_notation.services import format_exercise_sets

logger = logging.getLogger(__name__)

router = APIRouter()

# ---------------------------------------------------------------------------
# Request/Response Models
# ---------------------------------------------------------------------------


class ParseWorkoutRequest(BaseModel):
    """Request model for POST /parse/workout"""
    text: str = Field(..., max_length=50000, description="Notebook-style workout text")


class NormalizedExerciseResponse(BaseModel):
    """Response model for GET /exercises/normalize"""
    input: str
    canonical_name: str
    display_name: str
    display_name_local: str
    matched: bool
    exercise_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"ok": True}


@router.post("/parse/workout")
def parse_workout(request: ParseWorkoutRequest):
    """Parse workout text into exercises, expanded sets and totals."""
    workout = parse_workout_text(request.text)
    response = workout.model_dump()
    response["formatted"] = [format_exercise_sets(e) for e in workout.exercises]
    return JSONResponse(response)


@router.get("/exercises/normalize", response_model=NormalizedExerciseResponse)
def normalize_exercise(name: str = Query(..., max_length=200)):
    """Resolve an exercise name to its canonical catalog entry."""
    normalized = normalize_exercise_name(name)
    return NormalizedExerciseResponse(
        input=name,
        canonical_name=normalized.canonical_name,
        display_name=normalized.display_name,
        display_name_local=normalized.display_name_local,
        matched=normalized.matched,
        exercise_id=normalized.definition.id if normalized.definition else None,
    )


@router.get("/exercises/search", response_model=List[ExerciseDefinition])
def search_exercises(
    q: str = Query(..., max_length=200),
    limit: int = Query(10, ge=1, le=50),
):
    """Autocomplete search over catalog names and aliases."""
    return default_alias_index().search(q, limit=limit)


@router.get("/exercises", response_model=List[ExerciseDefinition])
def list_exercises(category: Optional[ExerciseCategory] = None):
    """List catalog exercises, optionally filtered by category."""
    index = default_alias_index()
    if category is None:
        return list(index.definitions)
    return index.get_by_category(category)
