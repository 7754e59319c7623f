"""
Catalog Models

Pydantic models for the static exercise catalog.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field


class ExerciseCategory(str, Enum):
    """Top-level grouping of catalog exercises"""
    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    CARDIO = "cardio"
    FULL_BODY = "full_body"


class ExerciseDefinition(BaseModel):
    """A canonical exercise and every spelling that should resolve to it"""
    id: str = Field(..., description="Stable identifier, unique within a catalog")
    canonical_name: str = Field(..., description="Name used for storage")
    display_name: str = Field(..., description="Display name in the primary locale")
    display_name_local: str = Field(..., description="Display name in the secondary locale")
    aliases: Tuple[str, ...] = Field(default_factory=tuple)
    category: ExerciseCategory
    muscle_groups: Tuple[str, ...] = Field(default_factory=tuple)
    equipment: Optional[str] = None
    is_bodyweight: bool = False

    class Config:
        frozen = True
        use_enum_values = True
