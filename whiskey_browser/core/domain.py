from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from whiskey_browser.core.filter_state import CATEGORICAL_DIMENSIONS
from whiskey_browser.core.record import Whiskey, is_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumericRange:
    """
    Observed min/max for one numeric dimension.

    `observed` is False when no record carried a value and the range holds
    display fallbacks instead. Ranges are for labelling controls only and are
    never applied as filter bounds.
    """
    min: float
    max: float
    observed: bool = True


@dataclass(frozen=True)
class _RangeSpec:
    value_of: Callable[[Whiskey], Optional[float]]
    fallback: NumericRange
    whole_numbers: bool = False


RANGE_SPECS: Dict[str, _RangeSpec] = {
    "age": _RangeSpec(lambda w: w.age, NumericRange(0, 30, observed=False)),
    "abv": _RangeSpec(lambda w: w.abv, NumericRange(40, 70, observed=False), whole_numbers=True),
    "rating": _RangeSpec(lambda w: w.rating, NumericRange(0, 10, observed=False)),
    "price": _RangeSpec(lambda w: w.coalesced_price, NumericRange(0, 500, observed=False), whole_numbers=True),
}


@dataclass(frozen=True)
class Domain:
    """
    Values available to the filter controls for the current collection.

    - categorical: dimension -> sorted distinct non-empty values
    - numeric: dimension -> NumericRange
    """
    categorical: Dict[str, List[str]] = field(default_factory=dict)
    numeric: Dict[str, NumericRange] = field(default_factory=dict)

    def options(self, dimension: str) -> List[str]:
        return list(self.categorical.get(dimension, []))

    def range(self, dimension: str) -> NumericRange:
        return self.numeric[dimension]


def _distinct_values(records: Iterable[Whiskey], attr: str) -> List[str]:
    values = {w.get(attr) for w in records}
    return sorted(v for v in values if isinstance(v, str) and v != "")


def _numeric_range(records: Sequence[Whiskey], spec: _RangeSpec) -> NumericRange:
    present = [v for v in (spec.value_of(w) for w in records) if is_number(v)]
    if not present:
        return spec.fallback

    low, high = min(present), max(present)
    if spec.whole_numbers:
        low, high = math.floor(low), math.ceil(high)
    return NumericRange(low, high)


def derive_domain(records: Sequence[Whiskey]) -> Domain:
    """
    Collect dropdown options and numeric ranges from a collection.
    """
    categorical = {name: _distinct_values(records, name) for name in CATEGORICAL_DIMENSIONS}
    numeric = {name: _numeric_range(records, spec) for name, spec in RANGE_SPECS.items()}

    logger.debug(
        "Derived collection domain",
        extra={
            "n_records": len(records),
            "unobserved_ranges": sorted(n for n, r in numeric.items() if not r.observed),
        },
    )
    return Domain(categorical=categorical, numeric=numeric)
