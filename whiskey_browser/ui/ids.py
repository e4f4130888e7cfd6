from __future__ import annotations

__all__ = ["IDs", "FILTER_CONTROL_IDS", "tri_state_id", "sort_header_id", "row_select_id"]


class IDs:
    class Store:
        BROWSER_STATE = "browser-state"

    class Control:
        COLLECTION_SELECT = "collection-select"

        TYPE_SELECT = "type-select"
        DISTILLERY_SELECT = "distillery-select"
        REGION_SELECT = "region-select"
        COUNTRY_SELECT = "country-select"

        AGE_MIN = "age-min-input"
        AGE_MAX = "age-max-input"
        ABV_MIN = "abv-min-input"
        ABV_MAX = "abv-max-input"
        RATING_MIN = "rating-min-input"
        RATING_MAX = "rating-max-input"
        PRICE_MIN = "price-min-input"
        PRICE_MAX = "price-max-input"

        CLEAR_FILTERS = "clear-filters-button"
        ACTIVE_FILTER_BADGE = "active-filter-badge"

        SELECT_ALL = "select-all-button"

        SIDEBAR_COLLECTION_NAME = "sidebar-collection-name"
        SIDEBAR_COLLECTION_META = "sidebar-collection-meta"

    class Pattern:
        TRI_STATE = "tri-state-toggle"
        SORT_HEADER = "sort-header"
        ROW_SELECT = "row-select"

    class Panel:
        TABLE_CONTAINER = "collection-table-container"
        RESULT_SUMMARY = "result-summary"
        SELECTION_SUMMARY = "selection-summary"


# Filter dimension -> control that edits it
FILTER_CONTROL_IDS = {
    "type": IDs.Control.TYPE_SELECT,
    "distillery": IDs.Control.DISTILLERY_SELECT,
    "region": IDs.Control.REGION_SELECT,
    "country": IDs.Control.COUNTRY_SELECT,
    "age_min": IDs.Control.AGE_MIN,
    "age_max": IDs.Control.AGE_MAX,
    "abv_min": IDs.Control.ABV_MIN,
    "abv_max": IDs.Control.ABV_MAX,
    "rating_min": IDs.Control.RATING_MIN,
    "rating_max": IDs.Control.RATING_MAX,
    "price_min": IDs.Control.PRICE_MIN,
    "price_max": IDs.Control.PRICE_MAX,
}


def tri_state_id(dimension: str) -> dict:
    return {"type": IDs.Pattern.TRI_STATE, "dimension": dimension}


def sort_header_id(column: str) -> dict:
    return {"type": IDs.Pattern.SORT_HEADER, "column": column}


def row_select_id(record_id: int) -> dict:
    return {"type": IDs.Pattern.ROW_SELECT, "record_id": record_id}
