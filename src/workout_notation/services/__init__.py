"""Post-processing passes over parsed sets and exercises."""
from .aggregator import build_workout, sets_volume, summarize_exercise
from .formatter import format_exercise_sets, format_set
from .set_expander import expand_sets, finalize_sets, inherit_weights

__all__ = [
    "build_workout",
    "expand_sets",
    "finalize_sets",
    "format_exercise_sets",
    "format_set",
    "inherit_weights",
    "sets_volume",
    "summarize_exercise",
]
