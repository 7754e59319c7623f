"""Human-readable rendering of parsed sets.

Rendering is lossy: many input spellings collapse onto the same fields, so
the output is a normalized notation, not an echo of what the user typed.
"""
from typing import List, Tuple

from workout_notation.parsers.models import ParsedExercise, ParsedSet


def format_number(value: float) -> str:
    """20.0 -> '20', 22.5 -> '22.5'"""
    if value == int(value):
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_duration(seconds: int) -> str:
    if seconds >= 60 and seconds % 60 == 0:
        return f"{seconds // 60} min"
    return f"{seconds} sec"


def format_set(parsed: ParsedSet) -> str:
    if parsed.reps is not None and parsed.weight is not None:
        text = f"{parsed.reps}x{format_number(parsed.weight)}kg"
    elif parsed.reps is not None and parsed.duration_seconds is not None:
        text = f"{parsed.reps}x{format_duration(parsed.duration_seconds)}"
    elif parsed.reps is not None:
        text = f"{parsed.reps} reps"
    elif parsed.duration_seconds is not None:
        text = format_duration(parsed.duration_seconds)
    elif parsed.weight is not None:
        text = f"{format_number(parsed.weight)}kg"
    else:
        text = "-"

    if parsed.set_count is not None and parsed.set_count > 1:
        text += f" x{parsed.set_count} sets"
    if parsed.side:
        text += f" ({parsed.side})"
    return text


def format_exercise_sets(exercise: ParsedExercise) -> str:
    """Render all sets, collapsing consecutive repeats into 'N × set'"""
    groups: List[Tuple[str, int]] = []
    for parsed in exercise.sets:
        text = format_set(parsed)
        if groups and groups[-1][0] == text:
            groups[-1] = (text, groups[-1][1] + 1)
        else:
            groups.append((text, 1))
    return ", ".join(text if count == 1 else f"{count} × {text}" for text, count in groups)
