"""
Locale vocabularies for workout notation.

Every word the set grammar recognises lives here, keyed by locale, so the
grammar itself stays free of language-specific literals. All entries are
lower case.
"""

import re
from dataclasses import dataclass, fields
from typing import Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class LocaleVocabulary:
    code: str
    counting_words: Tuple[str, ...] = ()
    sets_words: Tuple[str, ...] = ()
    each_side_phrases: Tuple[str, ...] = ()
    left_words: Tuple[str, ...] = ()
    right_words: Tuple[str, ...] = ()
    weight_units: Tuple[str, ...] = ()
    second_units: Tuple[str, ...] = ()
    minute_units: Tuple[str, ...] = ()
    superset_markers: Tuple[str, ...] = ()


LOCALES: Dict[str, LocaleVocabulary] = {
    "en": LocaleVocabulary(
        code="en",
        counting_words=("reps", "rep", "repetitions", "repetition", "times"),
        sets_words=("sets", "set", "rounds", "round"),
        each_side_phrases=(
            "each side", "per side", "each leg", "per leg", "each arm", "per arm",
        ),
        left_words=("left",),
        right_words=("right",),
        weight_units=("kg", "kgs", "kilo", "kilos"),
        second_units=("s", "sec", "secs", "second", "seconds"),
        minute_units=("m", "min", "mins", "minute", "minutes"),
        superset_markers=("superset", "super set", "ss"),
    ),
    "ru": LocaleVocabulary(
        code="ru",
        counting_words=(
            "раз", "раза", "повтор", "повтора", "повторов",
            "повторение", "повторения", "повторений",
        ),
        sets_words=("подход", "подхода", "подходов", "сет", "сета", "сетов", "круг", "круга", "кругов"),
        each_side_phrases=(
            "на каждую сторону", "в каждую сторону", "на сторону",
            "на каждую ногу", "на каждую руку", "каждой ногой", "каждой рукой",
        ),
        left_words=("левая", "левой", "левую", "левый", "лево", "слева"),
        right_words=("правая", "правой", "правую", "правый", "право", "справа"),
        weight_units=("кг",),
        second_units=("с", "сек", "секунд", "секунды", "секунда"),
        minute_units=("м", "мин", "минут", "минуты", "минута"),
        superset_markers=("суперсет", "супер сет"),
    ),
}


def vocabulary_for(codes: Optional[Iterable[str]] = None) -> LocaleVocabulary:
    """
    Merge the vocabularies of the given locales into one.

    Unknown codes are ignored; no codes (or none known) selects every locale.
    """
    selected = [LOCALES[c] for c in (codes or ()) if c in LOCALES]
    if not selected:
        selected = list(LOCALES.values())

    merged = {}
    for f in fields(LocaleVocabulary):
        if f.name == "code":
            continue
        words = []
        for vocab in selected:
            for word in getattr(vocab, f.name):
                if word not in words:
                    words.append(word)
        merged[f.name] = tuple(words)
    return LocaleVocabulary(code="+".join(v.code for v in selected), **merged)


def alternation(words: Iterable[str]) -> str:
    """Regex alternation, longest first, with inner spaces matching any whitespace"""
    ordered = sorted(set(words), key=len, reverse=True)
    parts = [r"\s+".join(re.escape(part) for part in word.split()) for word in ordered]
    return "(?:" + "|".join(parts) + ")" if parts else "(?!)"
