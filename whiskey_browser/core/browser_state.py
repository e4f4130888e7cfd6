from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Union

from whiskey_browser.core.filter_state import DEFAULT_FILTERS, FilterState
from whiskey_browser.core.predicates import apply_filters
from whiskey_browser.core.record import Whiskey
from whiskey_browser.core.selection import Selection
from whiskey_browser.core.sorting import SortState, sort_by_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetFilterDimension:
    name: str
    value: Any


@dataclass(frozen=True)
class CycleTriState:
    name: str


@dataclass(frozen=True)
class ClearFilters:
    pass


@dataclass(frozen=True)
class SetSort:
    column: str


@dataclass(frozen=True)
class SelectAll:
    pass


@dataclass(frozen=True)
class ToggleSelection:
    record_id: int


Action = Union[SetFilterDimension, CycleTriState, ClearFilters, SetSort, SelectAll, ToggleSelection]


@dataclass(frozen=True)
class BrowserState:
    """
    Everything the table view depends on besides the records themselves.
    """
    filters: FilterState = DEFAULT_FILTERS
    sort: SortState = field(default_factory=SortState)
    selection: Selection = field(default_factory=Selection)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filters": self.filters.to_dict(),
            "sort": self.sort.to_dict(),
            "selection": self.selection.to_list(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> BrowserState:
        data = data or {}
        return cls(
            filters=FilterState.from_dict(data.get("filters")),
            sort=SortState.from_dict(data.get("sort")),
            selection=Selection.from_list(data.get("selection")),
        )


def visible_records(records: Sequence[Whiskey], state: BrowserState) -> List[Whiskey]:
    """Filter then sort."""
    return sort_by_state(apply_filters(records, state.filters), state.sort)


def reduce(state: BrowserState, action: Action, records: Sequence[Whiskey] = ()) -> BrowserState:
    """
    Apply one user action and return the new state.

    `records` is the full collection; only SelectAll needs it, to work out
    which ids are currently visible.
    """
    if isinstance(action, SetFilterDimension):
        return dataclasses.replace(
            state, filters=state.filters.set_dimension(action.name, action.value)
        )

    if isinstance(action, CycleTriState):
        next_value = state.filters.tri_state(action.name).cycle()
        return dataclasses.replace(
            state, filters=state.filters.set_dimension(action.name, next_value)
        )

    if isinstance(action, ClearFilters):
        return dataclasses.replace(state, filters=state.filters.cleared())

    if isinstance(action, SetSort):
        return dataclasses.replace(state, sort=state.sort.toggle(action.column))

    if isinstance(action, SelectAll):
        visible_ids = [w.id for w in visible_records(records, state)]
        return dataclasses.replace(state, selection=state.selection.select_all(visible_ids))

    if isinstance(action, ToggleSelection):
        return dataclasses.replace(state, selection=state.selection.toggle(action.record_id))

    raise TypeError(f"Unsupported action: {action!r}")
