from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from whiskey_browser.core.domain import Domain
from whiskey_browser.core.filter_state import FilterState, TriState
from whiskey_browser.core.record import Whiskey
from whiskey_browser.core.sorting import SORTABLE_COLUMNS

TRI_STATE_LABELS: Dict[str, str] = {
    "limited_edition": "Limited Edition",
    "chill_filtered": "Chill Filtered",
    "natural_color": "Natural Color",
    "is_opened": "Opened",
}

COLUMN_HEADERS: Dict[str, str] = {
    "name": "Name",
    "type": "Type",
    "distillery": "Distillery",
    "region": "Region",
    "age": "Age",
    "abv": "ABV",
    "size": "Size",
    "quantity": "Qty",
    "msrp": "MSRP",
    "secondary_price": "Secondary",
    "rating": "Rating",
}

RANGE_UNITS: Dict[str, Tuple[str, str]] = {
    "age": ("", " yrs"),
    "abv": ("", "%"),
    "rating": ("", ""),
    "price": ("$", ""),
}

MISSING = "-"


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value))


def _formatter(template: Callable[[Any], str]) -> Callable[[Any], str]:
    def fmt(value: Any) -> str:
        if _is_missing(value):
            return MISSING
        return template(value)
    return fmt


_CELL_FORMATTERS: Dict[str, Callable[[Any], str]] = {
    "age": _formatter(lambda v: f"{v:g} years"),
    "abv": _formatter(lambda v: f"{v:g}%"),
    "quantity": _formatter(lambda v: f"{v:g}"),
    "msrp": _formatter(lambda v: f"${v:,.2f}"),
    "secondary_price": _formatter(lambda v: f"${v:,.2f}"),
    "rating": _formatter(lambda v: f"{v:.2f}/10"),
}


def get_filter_dropdown_options(
    domain: Domain,
) -> Tuple[List[dict], List[dict], List[dict], List[dict]]:
    type_options = [
        {"label": t[:1].upper() + t[1:], "value": t}
        for t in domain.options("type")
    ]
    distillery_options = [{"label": d, "value": d} for d in domain.options("distillery")]
    region_options = [{"label": r, "value": r} for r in domain.options("region")]
    country_options = [{"label": c, "value": c} for c in domain.options("country")]

    return type_options, distillery_options, region_options, country_options


def range_placeholders(domain: Domain) -> Dict[str, str]:
    """
    Placeholder text for every bound input, e.g. {"age_min": "Min (8)", ...}.
    """
    placeholders: Dict[str, str] = {}
    for dimension, rng in domain.numeric.items():
        placeholders[f"{dimension}_min"] = f"Min ({rng.min:g})"
        placeholders[f"{dimension}_max"] = f"Max ({rng.max:g})"
    return placeholders


def range_label(dimension: str, title: str, filters: FilterState, domain: Domain) -> str:
    """
    Section label for a range filter; shows the effective span once a bound is set.
    """
    lower = getattr(filters, f"{dimension}_min")
    upper = getattr(filters, f"{dimension}_max")
    if lower is None and upper is None:
        return title

    rng = domain.range(dimension)
    prefix, suffix = RANGE_UNITS.get(dimension, ("", ""))
    low = lower if lower is not None else rng.min
    high = upper if upper is not None else rng.max
    return f"{title} ({prefix}{low:g}-{prefix}{high:g}{suffix})"


def tri_state_presentation(value: TriState) -> Dict[str, Any]:
    """Button styling for a tri-state toggle."""
    if value is TriState.YES:
        return {"icon": "✔", "color": "warning", "outline": False, "title": "Yes only"}
    if value is TriState.NO:
        return {"icon": "✖", "color": "secondary", "outline": False, "title": "No only"}
    return {"icon": "○", "color": "secondary", "outline": True, "title": "Any"}


def records_frame(records: Sequence[Whiskey]) -> pd.DataFrame:
    """
    Display frame for the collection table: one row per record, in the
    given order, with an `id` column followed by the sortable columns
    rendered as strings.
    """
    columns = ["id", *SORTABLE_COLUMNS]
    rows = [{col: w.get(col) for col in columns} for w in records]
    df = pd.DataFrame(rows, columns=columns, dtype=object)

    for col in SORTABLE_COLUMNS:
        fmt = _CELL_FORMATTERS.get(col)
        if fmt is not None:
            df[col] = df[col].map(fmt)
        else:
            df[col] = df[col].map(lambda v: MISSING if _is_missing(v) or v == "" else str(v))

    return df


def result_summary(n_visible: int, n_total: int) -> str:
    if n_visible == n_total:
        return f"{n_total} bottles"
    return f"Showing {n_visible} of {n_total} bottles"


def selection_summary(n_selected: int, n_visible_selected: int) -> str:
    if n_selected == 0:
        return "No bottles selected"
    hidden = n_selected - n_visible_selected
    text = f"{n_selected} selected"
    if hidden:
        text += f" ({hidden} hidden by filters)"
    return text


def select_all_label(all_selected: bool, some_selected: bool) -> str:
    if all_selected:
        return "☑ Deselect all"
    if some_selected:
        return "▣ Select all"
    return "☐ Select all"


def collection_meta(n_records: int, owner: Optional[str]) -> str:
    text = f"{n_records} bottles"
    if owner:
        text += f" · {owner}"
    return text
