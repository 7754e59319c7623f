"""Volume and set totals for parsed exercises and workouts."""
from typing import List

from workout_notation.parsers.models import ParsedExercise, ParsedSet, ParsedWorkout


def sets_volume(sets: List[ParsedSet]) -> float:
    return sum((s.volume for s in sets), 0.0)


def summarize_exercise(exercise: ParsedExercise) -> ParsedExercise:
    exercise.total_volume = sets_volume(exercise.sets)
    return exercise


def build_workout(exercises: List[ParsedExercise]) -> ParsedWorkout:
    """Recompute every exercise volume and the workout totals"""
    for exercise in exercises:
        summarize_exercise(exercise)
    return ParsedWorkout(
        exercises=exercises,
        total_volume=sum((e.total_volume for e in exercises), 0.0),
        total_sets=sum(len(e.sets) for e in exercises),
    )
