from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Sequence, Tuple

import dash
from dash import ALL, Input, Output, State, exceptions

from whiskey_browser.core.browser_state import (
    Action,
    BrowserState,
    ClearFilters,
    CycleTriState,
    SetFilterDimension,
    reduce,
)
from whiskey_browser.core.domain import derive_domain
from whiskey_browser.core.filter_state import BOUND_DIMENSIONS, DEFAULT_FILTERS, FilterState
from whiskey_browser.ui.helpers import (
    TRI_STATE_LABELS,
    collection_meta,
    get_filter_dropdown_options,
    range_label,
    range_placeholders,
    tri_state_presentation,
)
from whiskey_browser.ui.ids import FILTER_CONTROL_IDS, IDs
from whiskey_browser.ui.layout.build_filter_panel import RANGE_TITLES

if TYPE_CHECKING:
    from whiskey_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

DIMENSION_BY_CONTROL = {control: dim for dim, control in FILTER_CONTROL_IDS.items()}
FILTER_CONTROLS = list(FILTER_CONTROL_IDS.values())


def _actions_for_triggers(triggers: Sequence[Tuple[Any, Any]]) -> List[Action]:
    """
    Translate (component id, new value) pairs into reducer actions.
    Clicks with a falsy n_clicks come from freshly rendered buttons and
    are ignored.
    """
    actions: List[Action] = []
    for component_id, value in triggers:
        if component_id == IDs.Control.CLEAR_FILTERS:
            if value:
                actions.append(ClearFilters())
        elif isinstance(component_id, dict) and component_id.get("type") == IDs.Pattern.TRI_STATE:
            if value:
                actions.append(CycleTriState(component_id["dimension"]))
        elif component_id in DIMENSION_BY_CONTROL:
            actions.append(SetFilterDimension(DIMENSION_BY_CONTROL[component_id], value))
    return actions


def _next_state_data(
    state_data: Dict[str, Any] | None,
    triggers: Sequence[Tuple[Any, Any]],
) -> Dict[str, Any] | None:
    """
    Pure helper: apply the triggered filter changes to the stored state.
    Returns None when nothing changed.
    """
    state = BrowserState.from_dict(state_data)

    if any(component_id == IDs.Control.COLLECTION_SELECT for component_id, _ in triggers):
        # New collection: its ids and domain are unrelated to the old one
        return BrowserState(sort=state.sort).to_dict()

    actions = _actions_for_triggers(triggers)
    if not actions:
        return None

    for action in actions:
        state = reduce(state, action)
    return state.to_dict()


def _tri_state_outputs(filters: FilterState, dimensions: Sequence[str]):
    children, colors, outlines, titles = [], [], [], []
    for dimension in dimensions:
        look = tri_state_presentation(filters.tri_state(dimension))
        children.append(f"{look['icon']} {TRI_STATE_LABELS[dimension]}")
        colors.append(look["color"])
        outlines.append(look["outline"])
        titles.append(look["title"])
    return children, colors, outlines, titles


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Sidebar + options per collection
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SIDEBAR_COLLECTION_NAME, "children"),
        Output(IDs.Control.SIDEBAR_COLLECTION_META, "children"),
        Output(IDs.Control.TYPE_SELECT, "options"),
        Output(IDs.Control.DISTILLERY_SELECT, "options"),
        Output(IDs.Control.REGION_SELECT, "options"),
        Output(IDs.Control.COUNTRY_SELECT, "options"),
        Output(IDs.Control.TYPE_SELECT, "disabled"),
        Output(IDs.Control.DISTILLERY_SELECT, "disabled"),
        Output(IDs.Control.REGION_SELECT, "disabled"),
        Output(IDs.Control.COUNTRY_SELECT, "disabled"),
        *[Output(FILTER_CONTROL_IDS[name], "placeholder") for name in BOUND_DIMENSIONS],
        Input(IDs.Control.COLLECTION_SELECT, "value"),
    )
    def update_filter_options(collection_name: str | None):
        collection = ctx.collection(collection_name)
        domain = collection.domain() if collection is not None else derive_domain([])

        options = get_filter_dropdown_options(domain)
        placeholders = range_placeholders(domain)

        if collection is None:
            name, meta = "No collection", "0 bottles"
        else:
            name, meta = collection.name, collection_meta(len(collection), collection.owner)

        return (
            name,
            meta,
            *options,
            *[not opts for opts in options],
            *[placeholders[n] for n in BOUND_DIMENSIONS],
        )

    # ---------------------------------------------------------
    # Reset the controls on "clear all" or collection switch
    # ---------------------------------------------------------
    @app.callback(
        *[Output(control, "value") for control in FILTER_CONTROLS],
        Input(IDs.Control.CLEAR_FILTERS, "n_clicks"),
        Input(IDs.Control.COLLECTION_SELECT, "value"),
        prevent_initial_call=True,
    )
    def reset_filter_controls(_n_clicks, _collection_name):
        return tuple(DEFAULT_FILTERS.to_dict()[DIMENSION_BY_CONTROL[c]] for c in FILTER_CONTROLS)

    # ---------------------------------------------------------
    # UI -> BrowserState.filters
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.BROWSER_STATE, "data", allow_duplicate=True),
        *[Input(control, "value") for control in FILTER_CONTROLS],
        Input({"type": IDs.Pattern.TRI_STATE, "dimension": ALL}, "n_clicks"),
        Input(IDs.Control.CLEAR_FILTERS, "n_clicks"),
        Input(IDs.Control.COLLECTION_SELECT, "value"),
        State(IDs.Store.BROWSER_STATE, "data"),
        prevent_initial_call=True,
    )
    def sync_filters_from_ui(*args):
        state_data = args[-1]
        triggers = [
            (dash.ctx.triggered_prop_ids[t["prop_id"]], t["value"])
            for t in dash.ctx.triggered
            if t["prop_id"] in dash.ctx.triggered_prop_ids
        ]

        new_data = _next_state_data(state_data, triggers)
        if new_data is None or new_data == state_data:
            raise exceptions.PreventUpdate

        logger.debug(
            "Filter state updated",
            extra={"n_active_filters": FilterState.from_dict(new_data["filters"]).active_count()},
        )
        return new_data

    # ---------------------------------------------------------
    # BrowserState.filters -> tri-state buttons, badge, range labels
    # ---------------------------------------------------------
    @app.callback(
        Output({"type": IDs.Pattern.TRI_STATE, "dimension": ALL}, "children"),
        Output({"type": IDs.Pattern.TRI_STATE, "dimension": ALL}, "color"),
        Output({"type": IDs.Pattern.TRI_STATE, "dimension": ALL}, "outline"),
        Output({"type": IDs.Pattern.TRI_STATE, "dimension": ALL}, "title"),
        Input(IDs.Store.BROWSER_STATE, "data"),
    )
    def update_tri_state_buttons(state_data):
        filters = BrowserState.from_dict(state_data).filters
        dimensions = [o["id"]["dimension"] for o in dash.ctx.outputs_list[0]]
        return _tri_state_outputs(filters, dimensions)

    @app.callback(
        Output(IDs.Control.ACTIVE_FILTER_BADGE, "children"),
        Output(IDs.Control.CLEAR_FILTERS, "disabled"),
        *[Output(f"{dimension}-range-label", "children") for dimension, _ in RANGE_TITLES],
        Input(IDs.Store.BROWSER_STATE, "data"),
        State(IDs.Control.COLLECTION_SELECT, "value"),
    )
    def update_filter_summary(state_data, collection_name):
        filters = BrowserState.from_dict(state_data).filters
        collection = ctx.collection(collection_name)
        domain = collection.domain() if collection is not None else derive_domain([])

        return (
            str(filters.active_count()),
            not filters.has_active(),
            *[range_label(dimension, title, filters, domain) for dimension, title in RANGE_TITLES],
        )
