"""
Parser Models

Pydantic models for the structured output of workout text parsing.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Side(str, Enum):
    """Which side a unilateral set was performed on"""
    LEFT = "left"
    RIGHT = "right"


class ParsedSet(BaseModel):
    """A single set, or a repeated set before expansion"""
    reps: Optional[int] = Field(default=None, ge=0)
    weight: Optional[float] = Field(default=None, ge=0, description="External load as written (kg)")
    duration_seconds: Optional[int] = Field(default=None, ge=0)
    is_bodyweight: bool = False
    side: Optional[Side] = None
    set_count: Optional[int] = Field(default=None, ge=0, description="Repeat count; absent after expansion")

    class Config:
        use_enum_values = True

    @property
    def volume(self) -> float:
        """reps * weight when both are known, else 0"""
        if self.reps is None or self.weight is None:
            return 0.0
        return self.reps * self.weight


class ParsedExercise(BaseModel):
    """An exercise and its sets in chronological order"""
    name: str = Field(..., description="Canonical name, or the input text when unmatched")
    display_name: str
    display_name_local: str
    was_normalized: bool = False
    sets: List[ParsedSet] = Field(default_factory=list)
    superset_group: Optional[int] = Field(default=None, description="Shared by exercises of one superset")
    total_volume: float = 0.0
    is_bodyweight: bool = False


class ParsedWorkout(BaseModel):
    """Exercises in input order plus workout totals"""
    exercises: List[ParsedExercise] = Field(default_factory=list)
    total_volume: float = 0.0
    total_sets: int = 0
