"""Exercise catalog and alias index."""
from .alias_index import AliasIndex, CatalogError, default_alias_index, fold
from .exercises import EXERCISES_DATABASE
from .models import ExerciseCategory, ExerciseDefinition

__all__ = [
    "AliasIndex",
    "CatalogError",
    "EXERCISES_DATABASE",
    "ExerciseCategory",
    "ExerciseDefinition",
    "default_alias_index",
    "fold",
]
