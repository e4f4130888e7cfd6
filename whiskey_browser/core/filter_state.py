from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional

from whiskey_browser.core.exceptions import UnknownDimensionError

CATEGORICAL_DIMENSIONS = ("type", "distillery", "region", "country")
TRI_STATE_DIMENSIONS = ("limited_edition", "chill_filtered", "natural_color", "is_opened")
RANGE_DIMENSIONS = ("age", "abv", "rating", "price")
BOUND_DIMENSIONS = tuple(
    f"{name}_{edge}" for name in RANGE_DIMENSIONS for edge in ("min", "max")
)


class TriState(Enum):
    """
    Three-way toggle behind the boolean filters.

    ANY -> YES -> NO -> ANY
    """

    ANY = "any"
    YES = "yes"
    NO = "no"

    def cycle(self) -> TriState:
        if self is TriState.ANY:
            return TriState.YES
        if self is TriState.YES:
            return TriState.NO
        return TriState.ANY

    def as_filter_value(self) -> Optional[bool]:
        if self is TriState.ANY:
            return None
        return self is TriState.YES

    @classmethod
    def from_filter_value(cls, value: Optional[bool]) -> TriState:
        if value is None:
            return cls.ANY
        return cls.YES if value else cls.NO


def normalise_bound(value: Any) -> Optional[float]:
    """
    Turn user input for a numeric bound into a float, or None when it
    cannot be used as a bound.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    elif isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def _normalise_category(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _normalise_tri_state(value: Any) -> Optional[bool]:
    if isinstance(value, TriState):
        return value.as_filter_value()
    if isinstance(value, bool):
        return value
    return None


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current filter constraints over a collection.

    Fields:

    - type, distillery, region, country: exact-match constraint, "" when unset
    - limited_edition, chill_filtered, natural_color, is_opened: True/False
      required, None when unset
    - <measure>_min / <measure>_max: inclusive bounds, None when unset.
      price bounds apply to the purchase price, falling back to MSRP.

    Instances are immutable; use set_dimension / cleared to derive new ones.
    """

    type: str = ""
    distillery: str = ""
    region: str = ""
    country: str = ""

    limited_edition: Optional[bool] = None
    chill_filtered: Optional[bool] = None
    natural_color: Optional[bool] = None
    is_opened: Optional[bool] = None

    age_min: Optional[float] = None
    age_max: Optional[float] = None
    abv_min: Optional[float] = None
    abv_max: Optional[float] = None
    rating_min: Optional[float] = None
    rating_max: Optional[float] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None

    def set_dimension(self, name: str, value: Any) -> FilterState:
        """Return a copy with exactly one dimension replaced."""
        if name in CATEGORICAL_DIMENSIONS:
            normalised = _normalise_category(value)
        elif name in TRI_STATE_DIMENSIONS:
            normalised = _normalise_tri_state(value)
        elif name in BOUND_DIMENSIONS:
            normalised = normalise_bound(value)
        else:
            raise UnknownDimensionError(name)
        return dataclasses.replace(self, **{name: normalised})

    def tri_state(self, name: str) -> TriState:
        if name not in TRI_STATE_DIMENSIONS:
            raise UnknownDimensionError(name)
        return TriState.from_filter_value(getattr(self, name))

    def cleared(self) -> FilterState:
        return DEFAULT_FILTERS

    def active_count(self) -> int:
        count = sum(1 for name in CATEGORICAL_DIMENSIONS if getattr(self, name) != "")
        count += sum(1 for name in TRI_STATE_DIMENSIONS if getattr(self, name) is not None)
        count += sum(1 for name in BOUND_DIMENSIONS if getattr(self, name) is not None)
        return count

    def has_active(self) -> bool:
        return self.active_count() > 0

    def is_default(self) -> bool:
        return self == DEFAULT_FILTERS

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterState:
        state = DEFAULT_FILTERS
        for name, value in (data or {}).items():
            try:
                state = state.set_dimension(name, value)
            except UnknownDimensionError:
                continue
        return state


DEFAULT_FILTERS = FilterState()
