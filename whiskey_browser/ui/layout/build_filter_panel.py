from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from whiskey_browser.core.collection import Collection
from whiskey_browser.core.domain import Domain, derive_domain
from whiskey_browser.core.filter_state import TRI_STATE_DIMENSIONS, TriState
from whiskey_browser.ui.helpers import (
    TRI_STATE_LABELS,
    collection_meta,
    get_filter_dropdown_options,
    range_placeholders,
    tri_state_presentation,
)
from whiskey_browser.ui.ids import FILTER_CONTROL_IDS, IDs, tri_state_id

RANGE_TITLES = (
    ("age", "Age"),
    ("abv", "ABV"),
    ("rating", "Rating"),
    ("price", "Price"),
)


def _dropdown(label: str, control_id: str, options: List[dict], placeholder: str) -> html.Div:
    return html.Div(
        [
            html.Label(label, className="form-label small text-muted"),
            dcc.Dropdown(
                id=control_id,
                options=options,
                value="",
                placeholder=placeholder,
                disabled=not options,
                className="mb-3",
            ),
        ]
    )


def _range_inputs(dimension: str, title: str, placeholders: dict) -> html.Div:
    return html.Div(
        [
            html.Label(title, id=f"{dimension}-range-label", className="form-label small text-muted"),
            html.Div(
                [
                    dcc.Input(
                        id=FILTER_CONTROL_IDS[f"{dimension}_min"],
                        type="number",
                        debounce=True,
                        placeholder=placeholders.get(f"{dimension}_min", "Min"),
                        className="form-control form-control-sm",
                    ),
                    html.Span("to", className="text-muted"),
                    dcc.Input(
                        id=FILTER_CONTROL_IDS[f"{dimension}_max"],
                        type="number",
                        debounce=True,
                        placeholder=placeholders.get(f"{dimension}_max", "Max"),
                        className="form-control form-control-sm",
                    ),
                ],
                className="d-flex gap-2 align-items-center mb-3",
            ),
        ]
    )


def _tri_state_button(dimension: str) -> dbc.Button:
    look = tri_state_presentation(TriState.ANY)
    return dbc.Button(
        f"{look['icon']} {TRI_STATE_LABELS[dimension]}",
        id=tri_state_id(dimension),
        n_clicks=0,
        size="sm",
        color=look["color"],
        outline=look["outline"],
        title=look["title"],
    )


def build_filter_panel(collection: Optional[Collection]) -> dbc.Card:
    domain: Domain = collection.domain() if collection is not None else derive_domain([])
    type_options, distillery_options, region_options, country_options = get_filter_dropdown_options(domain)
    placeholders = range_placeholders(domain)

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Span("Filters", className="fw-semibold"),
                        dbc.Badge("0", id=IDs.Control.ACTIVE_FILTER_BADGE, color="light", text_color="dark"),
                    ],
                    className="d-flex justify-content-between align-items-center",
                )
            ),
            dbc.CardBody(
                [
                    html.Div([
                        html.H5(
                            collection.name if collection is not None else "No collection",
                            id=IDs.Control.SIDEBAR_COLLECTION_NAME,
                            className="card-title",
                        ),
                        html.P(
                            collection_meta(len(collection), collection.owner) if collection is not None else "0 bottles",
                            id=IDs.Control.SIDEBAR_COLLECTION_META,
                            className="card-subtitle text-muted mb-3",
                        ),
                        html.Hr(),
                    ]),

                    _dropdown("Type", IDs.Control.TYPE_SELECT, type_options, "All Types"),
                    _dropdown("Distillery", IDs.Control.DISTILLERY_SELECT, distillery_options, "All Distilleries"),
                    _dropdown("Region", IDs.Control.REGION_SELECT, region_options, "All Regions"),
                    _dropdown("Country", IDs.Control.COUNTRY_SELECT, country_options, "All Countries"),

                    html.Label("Attributes", className="form-label small text-muted"),
                    html.Div(
                        [_tri_state_button(d) for d in TRI_STATE_DIMENSIONS],
                        className="d-flex flex-wrap gap-2 mb-3",
                    ),

                    *[_range_inputs(dimension, title, placeholders) for dimension, title in RANGE_TITLES],

                    dbc.Button(
                        "Clear All Filters",
                        id=IDs.Control.CLEAR_FILTERS,
                        n_clicks=0,
                        size="sm",
                        color="secondary",
                        outline=True,
                    ),
                ]
            ),
        ],
        className="wb-sidebar",
    )
