"""
Core domain layer: record model, filter state, predicate evaluation,
domain derivation, sorting and selection
"""

from .browser_state import BrowserState, reduce, visible_records
from .domain import Domain, NumericRange, derive_domain
from .filter_state import DEFAULT_FILTERS, FilterState, TriState
from .predicates import apply_filters
from .record import Whiskey
from .selection import Selection
from .sorting import SortDirection, SortState, sort_records

__all__ = [
    "BrowserState",
    "reduce",
    "visible_records",
    "Domain",
    "NumericRange",
    "derive_domain",
    "DEFAULT_FILTERS",
    "FilterState",
    "TriState",
    "apply_filters",
    "Whiskey",
    "Selection",
    "SortDirection",
    "SortState",
    "sort_records",
]
