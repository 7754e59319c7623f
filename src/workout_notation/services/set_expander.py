"""Expand repeated sets and carry weights forward within an exercise."""
from __future__ import annotations

from typing import List, Optional

from workout_notation.parsers.models import ParsedSet


def expand_sets(sets: List[ParsedSet]) -> List[ParsedSet]:
    """Replace every set carrying set_count=k with k plain copies.

    Sets without a count (or with a count of 0/1) are emitted once. No
    returned set carries set_count.
    """
    expanded: List[ParsedSet] = []
    for parsed in sets:
        copies = parsed.set_count if parsed.set_count and parsed.set_count > 1 else 1
        single = parsed.model_copy(update={"set_count": None})
        expanded.extend(single.model_copy() for _ in range(copies))
    return expanded


def inherit_weights(sets: List[ParsedSet]) -> List[ParsedSet]:
    """Fill missing weights from the last explicit weight earlier in the list.

    Only non-bodyweight sets that have reps and no weight of their own are
    filled. Returns new set objects; the input list is left untouched.
    """
    last_weight: Optional[float] = None
    result: List[ParsedSet] = []
    for parsed in sets:
        if parsed.weight is not None:
            last_weight = parsed.weight
            result.append(parsed)
        elif last_weight is not None and not parsed.is_bodyweight and parsed.reps is not None:
            result.append(parsed.model_copy(update={"weight": last_weight}))
        else:
            result.append(parsed)
    return result


def finalize_sets(sets: List[ParsedSet]) -> List[ParsedSet]:
    """Expansion followed by weight inheritance"""
    return inherit_weights(expand_sets(sets))
