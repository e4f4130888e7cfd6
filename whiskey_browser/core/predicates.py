from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence

from whiskey_browser.core.filter_state import (
    CATEGORICAL_DIMENSIONS,
    FilterState,
)
from whiskey_browser.core.record import Whiskey, is_number

logger = logging.getLogger(__name__)

# Absent values count as False for these flags.
COERCED_FLAGS = ("limited_edition", "natural_color", "is_opened")

# These flags need a recorded value before they can be matched at all.
STRICT_FLAGS = ("chill_filtered",)

MEASURE_FIELDS = ("age", "abv", "rating")

Predicate = Callable[[Whiskey], bool]


def _within(value: Any, lower: Optional[float], upper: Optional[float]) -> bool:
    if lower is None and upper is None:
        return True
    if not is_number(value):
        return False
    if lower is not None and value < lower:
        return False
    if upper is not None and value > upper:
        return False
    return True


def build_predicates(state: FilterState) -> List[Predicate]:
    """
    One predicate per set dimension. Unset dimensions contribute nothing,
    so the default state yields an empty list.
    """
    predicates: List[Predicate] = []

    for name in CATEGORICAL_DIMENSIONS:
        wanted = getattr(state, name)
        if wanted:
            predicates.append(lambda w, name=name, wanted=wanted: w.get(name) == wanted)

    for name in COERCED_FLAGS:
        wanted = getattr(state, name)
        if wanted is not None:
            predicates.append(
                lambda w, name=name, wanted=wanted: (w.get(name) is True) == wanted
            )

    for name in STRICT_FLAGS:
        wanted = getattr(state, name)
        if wanted is not None:
            predicates.append(
                lambda w, name=name, wanted=wanted: isinstance(w.get(name), bool)
                and w.get(name) == wanted
            )

    for name in MEASURE_FIELDS:
        lower = getattr(state, f"{name}_min")
        upper = getattr(state, f"{name}_max")
        if lower is not None or upper is not None:
            predicates.append(
                lambda w, name=name, lower=lower, upper=upper: _within(w.get(name), lower, upper)
            )

    if state.price_min is not None or state.price_max is not None:
        predicates.append(
            lambda w, lower=state.price_min, upper=state.price_max: _within(
                w.coalesced_price, lower, upper
            )
        )

    return predicates


def apply_filters(records: Sequence[Whiskey], state: FilterState) -> List[Whiskey]:
    """
    Return the records that satisfy every set dimension of `state`,
    in their original order.
    """
    predicates = build_predicates(state)
    if not predicates:
        return list(records)

    result = [w for w in records if all(p(w) for p in predicates)]

    logger.debug(
        "Applied filters",
        extra={
            "n_records": len(records),
            "n_matched": len(result),
            "n_active_filters": state.active_count(),
        },
    )
    return result
