from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

import dash
from dash import ALL, Input, Output, State, exceptions, html

from whiskey_browser.core.browser_state import (
    BrowserState,
    SelectAll,
    SetSort,
    ToggleSelection,
    reduce,
    visible_records,
)
from whiskey_browser.core.collection import Collection
from whiskey_browser.core.record import Whiskey
from whiskey_browser.ui.helpers import result_summary, select_all_label, selection_summary
from whiskey_browser.ui.ids import IDs
from whiskey_browser.ui.layout.build_table_panel import build_collection_table

if TYPE_CHECKING:
    from whiskey_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _render_view(collection: Optional[Collection], state_data: Dict[str, Any] | None):
    """
    Pure helper: build the table and the header texts for the current state.
    """
    state = BrowserState.from_dict(state_data)
    records: Sequence[Whiskey] = collection.records if collection is not None else ()

    view = visible_records(records, state)
    visible_ids = [w.id for w in view]
    selection = state.selection

    if not view:
        table = html.P("No bottles match the current filters.", className="text-muted mb-0")
    else:
        table = build_collection_table(view, state.sort, selection)

    return (
        table,
        result_summary(len(view), len(records)),
        selection_summary(len(selection), len(selection.visible_selected(visible_ids))),
        select_all_label(selection.all_selected(visible_ids), selection.some_selected(visible_ids)),
    )


def _triggered_click(pattern_type: str):
    """
    Return the pattern id of the clicked button, or None for the spurious
    trigger fired when buttons are re-rendered with n_clicks=0.
    """
    triggered_id = dash.ctx.triggered_id
    if not isinstance(triggered_id, dict) or triggered_id.get("type") != pattern_type:
        return None
    if not dash.ctx.triggered or not dash.ctx.triggered[0].get("value"):
        return None
    return triggered_id


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # BrowserState -> table
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Panel.TABLE_CONTAINER, "children"),
        Output(IDs.Panel.RESULT_SUMMARY, "children"),
        Output(IDs.Panel.SELECTION_SUMMARY, "children"),
        Output(IDs.Control.SELECT_ALL, "children"),
        Input(IDs.Store.BROWSER_STATE, "data"),
        Input(IDs.Control.COLLECTION_SELECT, "value"),
    )
    def render_collection_table(state_data, collection_name):
        return _render_view(ctx.collection(collection_name), state_data)

    # ---------------------------------------------------------
    # Header click -> sort
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.BROWSER_STATE, "data", allow_duplicate=True),
        Input({"type": IDs.Pattern.SORT_HEADER, "column": ALL}, "n_clicks"),
        State(IDs.Store.BROWSER_STATE, "data"),
        prevent_initial_call=True,
    )
    def on_sort_header_click(_clicks, state_data):
        clicked = _triggered_click(IDs.Pattern.SORT_HEADER)
        if clicked is None:
            raise exceptions.PreventUpdate
        state = reduce(BrowserState.from_dict(state_data), SetSort(clicked["column"]))
        return state.to_dict()

    # ---------------------------------------------------------
    # Selection
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.BROWSER_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.SELECT_ALL, "n_clicks"),
        State(IDs.Store.BROWSER_STATE, "data"),
        State(IDs.Control.COLLECTION_SELECT, "value"),
        prevent_initial_call=True,
    )
    def on_select_all(n_clicks, state_data, collection_name):
        collection = ctx.collection(collection_name)
        if not n_clicks or collection is None:
            raise exceptions.PreventUpdate
        state = reduce(BrowserState.from_dict(state_data), SelectAll(), collection.records)
        return state.to_dict()

    @app.callback(
        Output(IDs.Store.BROWSER_STATE, "data", allow_duplicate=True),
        Input({"type": IDs.Pattern.ROW_SELECT, "record_id": ALL}, "n_clicks"),
        State(IDs.Store.BROWSER_STATE, "data"),
        prevent_initial_call=True,
    )
    def on_row_select_click(_clicks, state_data):
        clicked = _triggered_click(IDs.Pattern.ROW_SELECT)
        if clicked is None:
            raise exceptions.PreventUpdate
        state = reduce(BrowserState.from_dict(state_data), ToggleSelection(int(clicked["record_id"])))
        return state.to_dict()
