"""
Set Notation Parser

Turns one fragment of notebook-style notation ("10x20kg", "60x10x3", "7x",
"3x45sec", "10 reps each side", ...) into a ParsedSet.

Grammars are independent NotationRule objects tried in a fixed order; the
first rule whose pattern matches the whole normalized fragment decides the
result. Anything no rule matches returns None, which callers treat as
"not set data".
"""

import logging
import math
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Tuple

from workout_notation.config import settings

from .locales import LocaleVocabulary, alternation, vocabulary_for
from .models import ParsedSet, Side

logger = logging.getLogger(__name__)

# Bounded so every match converts to a finite int/float
NUMBER = r"\d{1,6}(?:\.\d{1,3})?"
INT = r"\d{1,6}"

# Two-number heuristics for "A x B" without a unit
MAGNITUDE_RATIO = 1.5
BODYWEIGHT_MAX_SET_COUNT = 10
COMPARABLE_MAX_SET_COUNT = 5

# Sets counted by an "each side" phrase
EACH_SIDE_SET_COUNT = 2

_DECIMAL_COMMA = re.compile(r"(?<=\d),(?=\d)")
# Multiplication glyphs not touching a letter: "10х20" yes, "подхода" no
_MULTIPLY_GLYPH = re.compile(r"(?<![^\W\d_])[x×х*](?![^\W\d_])")
_TRAILING_PUNCTUATION = ".,;:"

Extractor = Callable[[re.Match, bool], Optional[ParsedSet]]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def is_fractional(value: float) -> bool:
    return value % 1 != 0


def normalize_token(text: str) -> str:
    """Lower-case, unify decimal commas and multiplication glyphs, collapse spaces"""
    token = text.lower().strip()
    token = _DECIMAL_COMMA.sub(".", token)
    token = _MULTIPLY_GLYPH.sub("x", token)
    token = " ".join(token.split())
    return token.rstrip(_TRAILING_PUNCTUATION).strip()


@dataclass(frozen=True)
class NotationRule:
    """One closed grammar: a full-match pattern plus its extractor"""
    name: str
    pattern: re.Pattern
    extract: Extractor

    def apply(self, token: str, is_bodyweight_context: bool = False) -> Optional[ParsedSet]:
        match = self.pattern.fullmatch(token)
        if match is None:
            return None
        return self.extract(match, is_bodyweight_context)


# ---------------------------------------------------------------------------
# Extractors
# ---------------------------------------------------------------------------


def _duration_seconds(match: re.Match) -> int:
    value = float(match.group("duration"))
    if match.group("minutes") is not None:
        value *= 60
    return round_half_up(value)


def _sets_with_duration(match: re.Match, bodyweight: bool) -> ParsedSet:
    return ParsedSet(
        set_count=int(match.group("count")),
        duration_seconds=_duration_seconds(match),
        is_bodyweight=True,
    )


def _counting_word(match: re.Match, bodyweight: bool) -> ParsedSet:
    return ParsedSet(reps=int(match.group("reps")), is_bodyweight=True)


def _counting_word_multiplier(match: re.Match, bodyweight: bool) -> ParsedSet:
    return ParsedSet(
        reps=int(match.group("reps")),
        set_count=int(match.group("count")),
        is_bodyweight=True,
    )


def _counting_word_each_side(match: re.Match, bodyweight: bool) -> ParsedSet:
    return ParsedSet(
        reps=int(match.group("reps")),
        set_count=EACH_SIDE_SET_COUNT,
        is_bodyweight=True,
    )


def _duration_multiplier(match: re.Match, bodyweight: bool) -> ParsedSet:
    return ParsedSet(
        duration_seconds=_duration_seconds(match),
        set_count=int(match.group("count")),
        is_bodyweight=True,
    )


def _count_times_duration(match: re.Match, bodyweight: bool) -> ParsedSet:
    return ParsedSet(
        reps=int(match.group("reps")),
        duration_seconds=_duration_seconds(match),
        is_bodyweight=bodyweight,
    )


def _duration_only(match: re.Match, bodyweight: bool) -> ParsedSet:
    return ParsedSet(duration_seconds=_duration_seconds(match), is_bodyweight=bodyweight)


def _weight_reps_sets(match: re.Match, bodyweight: bool) -> ParsedSet:
    # Three numbers always carry an external load, even for bodyweight exercises
    a = float(match.group("a"))
    b = float(match.group("b"))
    count = int(match.group("c"))
    if a > b:
        return ParsedSet(weight=a, reps=round_half_up(b), set_count=count)
    return ParsedSet(reps=round_half_up(a), weight=b, set_count=count)


def _reps_multiplier(match: re.Match, bodyweight: bool) -> ParsedSet:
    # Weight intentionally left unset so it can be inherited
    return ParsedSet(reps=int(match.group("reps")), is_bodyweight=bodyweight)


def _two_numbers_with_unit(match: re.Match, bodyweight: bool) -> ParsedSet:
    a = float(match.group("a"))
    b = float(match.group("b"))
    if is_fractional(a):
        return ParsedSet(weight=a, reps=round_half_up(b))
    return ParsedSet(reps=round_half_up(a), weight=b)


def _two_numbers(match: re.Match, bodyweight: bool) -> ParsedSet:
    a = float(match.group("a"))
    b = float(match.group("b"))

    if bodyweight and b <= BODYWEIGHT_MAX_SET_COUNT:
        return ParsedSet(reps=round_half_up(a), set_count=round_half_up(b), is_bodyweight=True)
    if is_fractional(a):
        return ParsedSet(weight=a, reps=round_half_up(b))
    if a > MAGNITUDE_RATIO * b:
        return ParsedSet(weight=a, reps=round_half_up(b))
    if b > MAGNITUDE_RATIO * a:
        return ParsedSet(reps=round_half_up(a), weight=b)

    # Comparable magnitudes
    if b <= COMPARABLE_MAX_SET_COUNT:
        return ParsedSet(reps=round_half_up(a), set_count=round_half_up(b), is_bodyweight=True)
    return ParsedSet(reps=round_half_up(a), weight=b)


def _weight_first_with_unit(match: re.Match, bodyweight: bool) -> ParsedSet:
    return ParsedSet(weight=float(match.group("weight")), reps=int(match.group("reps")))


def _bare_integer(match: re.Match, bodyweight: bool) -> ParsedSet:
    return ParsedSet(reps=int(match.group("reps")), is_bodyweight=True)


def _integer_with_word(match: re.Match, bodyweight: bool) -> ParsedSet:
    return ParsedSet(reps=int(match.group("reps")), is_bodyweight=True)


# ---------------------------------------------------------------------------
# Rule chain
# ---------------------------------------------------------------------------


def build_notation_rules(vocabulary: LocaleVocabulary) -> List[NotationRule]:
    """Compile the ordered grammar chain for one (merged) vocabulary."""
    counting = alternation(vocabulary.counting_words)
    sets_word = alternation(vocabulary.sets_words)
    each_side = alternation(vocabulary.each_side_phrases)
    weight = alternation(vocabulary.weight_units)
    time_unit = (
        rf"(?:(?P<minutes>{alternation(vocabulary.minute_units)})"
        rf"|{alternation(vocabulary.second_units)})"
    )
    duration = rf"(?P<duration>{NUMBER})\s*{time_unit}"

    specs: List[Tuple[str, str, Extractor]] = [
        ("sets_with_duration", rf"(?P<count>{INT})\s*{sets_word}\s*(?:x\s*)?{duration}", _sets_with_duration),
        ("counting_word", rf"(?P<reps>{INT})\s*{counting}", _counting_word),
        ("counting_word_multiplier", rf"(?P<reps>{INT})\s*{counting}\s*x\s*(?P<count>{INT})", _counting_word_multiplier),
        ("counting_word_each_side", rf"(?P<reps>{INT})\s*(?:{counting}\s*)?{each_side}", _counting_word_each_side),
        ("duration_multiplier", rf"{duration}\s*x\s*(?P<count>{INT})", _duration_multiplier),
        ("count_times_duration", rf"(?P<reps>{INT})\s*x\s*{duration}", _count_times_duration),
        ("duration_only", duration, _duration_only),
        ("weight_reps_sets", rf"(?P<a>{NUMBER})\s*x\s*(?P<b>{NUMBER})\s*x\s*(?P<c>{INT})\s*(?:{weight})?", _weight_reps_sets),
        ("reps_multiplier", rf"(?P<reps>{INT})\s*x", _reps_multiplier),
        ("two_numbers_with_unit", rf"(?P<a>{NUMBER})\s*x\s*(?P<b>{NUMBER})\s*{weight}", _two_numbers_with_unit),
        ("two_numbers", rf"(?P<a>{NUMBER})\s*x\s*(?P<b>{NUMBER})", _two_numbers),
        ("weight_first_with_unit", rf"(?P<weight>{NUMBER})\s*{weight}\s*x\s*(?P<reps>{INT})", _weight_first_with_unit),
        ("bare_integer", rf"(?P<reps>{INT})", _bare_integer),
        ("integer_with_word", rf"(?P<reps>{INT})\s+[^\W\d_]+", _integer_with_word),
    ]
    return [NotationRule(name, re.compile(pattern), extract) for name, pattern, extract in specs]


class SetNotationParser:
    """Parse single set fragments with an ordered rule chain"""

    def __init__(
        self,
        locales: Optional[Iterable[str]] = None,
        rules: Optional[List[NotationRule]] = None,
    ):
        self.vocabulary = vocabulary_for(locales)
        self.rules = rules if rules is not None else build_notation_rules(self.vocabulary)
        side_words = alternation(self.vocabulary.left_words + self.vocabulary.right_words)
        self._side_pattern = re.compile(rf"(?P<body>.+?)(?:\s+|\s*[,(]\s*)(?P<side>{side_words})\)?")

    def is_side_word(self, word: str) -> bool:
        word = normalize_token(word).strip("()")
        return word in self.vocabulary.left_words or word in self.vocabulary.right_words

    def strip_side(self, token: str) -> Tuple[str, Optional[str]]:
        """Remove a trailing left/right word, returning (remainder, side)"""
        match = self._side_pattern.fullmatch(token)
        if match is None:
            return token, None
        word = " ".join(match.group("side").split())
        side = Side.LEFT if word in self.vocabulary.left_words else Side.RIGHT
        return match.group("body").strip(), side.value

    def parse_token(self, text: str, is_bodyweight_context: bool = False) -> Optional[ParsedSet]:
        token = normalize_token(text)
        token, side = self.strip_side(token)
        if not token:
            return None

        for rule in self.rules:
            result = rule.apply(token, is_bodyweight_context)
            if result is None:
                continue
            if side is not None:
                result = result.model_copy(update={"side": side})
            logger.debug(f"Fragment {text!r} matched rule {rule.name}")
            return result
        return None


@lru_cache(maxsize=1)
def default_set_parser() -> SetNotationParser:
    """Parser over the locales enabled in settings, compiled once"""
    return SetNotationParser(settings.WORKOUT_NOTATION_LOCALES)


def parse_token(text: str, is_bodyweight_context: bool = False) -> Optional[ParsedSet]:
    """Parse one notation fragment with the default parser."""
    return default_set_parser().parse_token(text, is_bodyweight_context)
