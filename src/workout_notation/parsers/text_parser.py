"""
Workout Text Parser

Walks notebook-style workout text line by line:
- exercise-name lines start a new exercise (normalized against the catalog)
- set lines append sets to the current exercise
- a superset marker line ("superset:") groups the exercises that follow
- a bare separator line ("---") ends the superset

Unrecognised fragments are dropped; parsing never fails on user text.
"""

import logging
import re
from enum import Enum
from functools import lru_cache
from typing import List, Optional, Tuple

from workout_notation.catalog import AliasIndex
from workout_notation.normalizer import ExerciseNameNormalizer
from workout_notation.services.aggregator import build_workout
from workout_notation.services.set_expander import finalize_sets

from .locales import alternation
from .models import ParsedExercise, ParsedSet, ParsedWorkout
from .set_notation import SetNotationParser, default_set_parser, normalize_token

logger = logging.getLogger(__name__)

PLACEHOLDER_EXERCISE_NAME = "Untitled exercise"

SEPARATOR_PATTERN = re.compile(r"[-—–=_*]+")
_HAS_LETTER = re.compile(r"[^\W\d_]")
# Commas that are not decimal commas, and semicolons
_CHUNK_SPLIT = re.compile(r";|,(?!\d)|(?<!\d),")
_NAME_JUNK = " \t:-–—•*"
_LEADING_BULLETS = " \t-–—•*"
_LETTER_RUN = re.compile(r"[^\W\d_]+")


class _State(Enum):
    NORMAL = "normal"
    IN_SUPERSET = "in_superset"


class WorkoutTextParser:
    """Parse free-form workout text into a ParsedWorkout"""

    def __init__(
        self,
        index: Optional[AliasIndex] = None,
        set_parser: Optional[SetNotationParser] = None,
    ):
        self.normalizer = ExerciseNameNormalizer(index)
        self.set_parser = set_parser if set_parser is not None else default_set_parser()
        vocabulary = self.set_parser.vocabulary
        markers = alternation(vocabulary.superset_markers)
        self._superset_pattern = re.compile(rf"{markers}\s*:?", re.IGNORECASE)
        self._notation_words = {
            "x",
            *vocabulary.counting_words,
            *vocabulary.sets_words,
            *vocabulary.weight_units,
            *vocabulary.second_units,
            *vocabulary.minute_units,
            *vocabulary.left_words,
            *vocabulary.right_words,
        }

    def parse(self, text: str) -> ParsedWorkout:
        exercises: List[ParsedExercise] = []
        current: Optional[ParsedExercise] = None
        state = _State.NORMAL
        superset_group = 0

        for raw_line in text.splitlines():
            line = raw_line.strip()
            if not line:
                continue

            if self.is_superset_marker(line):
                superset_group += 1
                state = _State.IN_SUPERSET
                continue

            if SEPARATOR_PATTERN.fullmatch(line):
                state = _State.NORMAL
                continue

            group = superset_group if state is _State.IN_SUPERSET else None
            context = current.is_bodyweight if current is not None else False
            sets = self.parse_set_line(line.lstrip(_LEADING_BULLETS), context)

            if sets is None:
                if current is not None:
                    exercises.append(self._finalize(current))
                current = self._start_exercise(line, group)
                continue

            if not sets:
                logger.debug(f"No set data in line {line!r}")
                continue

            if current is None:
                current = self._placeholder_exercise(group)
            current.sets.extend(sets)

        if current is not None:
            exercises.append(self._finalize(current))

        workout = build_workout(exercises)
        logger.info(
            f"Parsed workout text: {len(workout.exercises)} exercises, "
            f"{workout.total_sets} sets, volume {workout.total_volume:g}"
        )
        return workout

    def is_superset_marker(self, line: str) -> bool:
        return self._superset_pattern.fullmatch(line.strip()) is not None

    def parse_set_line(self, line: str, is_bodyweight_context: bool = False) -> Optional[List[ParsedSet]]:
        """
        Parse a line as set data.

        Returns:
            None when the line is an exercise name (a fragment that does not
            parse holds a word other than units, counting or side words), otherwise the sets found (possibly empty).
        """
        whole = self.set_parser.parse_token(line, is_bodyweight_context)
        if whole is not None:
            return [whole]

        sets, failed = self._parse_fragments(line, is_bodyweight_context)
        if any(self._has_name_words(piece) for piece in failed):
            return None
        for piece in failed:
            logger.debug(f"Dropped fragment {piece!r}")
        return sets

    def _parse_fragments(self, line: str, is_bodyweight_context: bool) -> Tuple[List[ParsedSet], List[str]]:
        """Parse comma/semicolon chunks, falling back to whitespace pieces.

        Returns the parsed sets and the pieces that did not parse.
        """
        sets: List[ParsedSet] = []
        failed: List[str] = []
        for chunk in _CHUNK_SPLIT.split(line):
            chunk = chunk.strip()
            if not chunk:
                continue
            parsed = self.set_parser.parse_token(chunk, is_bodyweight_context)
            if parsed is not None:
                sets.append(parsed)
                continue
            for piece in self._split_pieces(chunk):
                parsed = self.set_parser.parse_token(piece, is_bodyweight_context)
                if parsed is None:
                    failed.append(piece)
                else:
                    sets.append(parsed)
        return sets, failed

    def _has_name_words(self, piece: str) -> bool:
        """True when a fragment holds a word that is not part of set notation"""
        words = _LETTER_RUN.findall(normalize_token(piece))
        return any(word not in self._notation_words for word in words)

    def _split_pieces(self, chunk: str) -> List[str]:
        """Whitespace pieces, keeping a side word attached to the set before it"""
        pieces: List[str] = []
        for word in chunk.split():
            if pieces and self.set_parser.is_side_word(word):
                pieces[-1] = f"{pieces[-1]} {word}"
            else:
                pieces.append(word)
        return pieces

    def split_inline_sets(self, line: str) -> Tuple[str, str]:
        """
        Split "Plank 3x45sec" into ("Plank", "3x45sec").

        Picks the longest trailing run of words that parses as sets while the
        leading part still contains letters. Returns (line, "") when there is
        no such run.
        """
        words = line.split()
        for k in range(1, len(words)):
            name = " ".join(words[:k])
            if not _HAS_LETTER.search(name):
                continue
            tail = " ".join(words[k:])
            if self.set_parser.parse_token(tail) is not None:
                return name, tail
            sets, failed = self._parse_fragments(tail, False)
            if sets and not failed:
                return name, tail
        return line, ""

    def _start_exercise(self, line: str, group: Optional[int]) -> ParsedExercise:
        name_text, tail = self.split_inline_sets(line)
        name_text = name_text.strip(_NAME_JUNK) or name_text
        normalized = self.normalizer.normalize(name_text)
        definition = normalized.definition

        exercise = ParsedExercise(
            name=normalized.canonical_name,
            display_name=normalized.display_name,
            display_name_local=normalized.display_name_local,
            was_normalized=normalized.matched,
            superset_group=group,
            is_bodyweight=definition.is_bodyweight if definition is not None else False,
        )
        if tail:
            sets = self.parse_set_line(tail, exercise.is_bodyweight) or []
            exercise.sets.extend(sets)
        return exercise

    def _placeholder_exercise(self, group: Optional[int]) -> ParsedExercise:
        return ParsedExercise(
            name=PLACEHOLDER_EXERCISE_NAME,
            display_name=PLACEHOLDER_EXERCISE_NAME,
            display_name_local=PLACEHOLDER_EXERCISE_NAME,
            was_normalized=False,
            superset_group=group,
        )

    @staticmethod
    def _finalize(exercise: ParsedExercise) -> ParsedExercise:
        exercise.sets = finalize_sets(exercise.sets)
        return exercise


@lru_cache(maxsize=1)
def default_text_parser() -> WorkoutTextParser:
    return WorkoutTextParser()


def parse_workout_text(text: str) -> ParsedWorkout:
    """Parse workout text with the bundled catalog and configured locales."""
    return default_text_parser().parse(text)
