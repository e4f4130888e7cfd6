from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from whiskey_browser.core.browser_state import BrowserState
from whiskey_browser.ui.config import AppConfig
from whiskey_browser.ui.ids import IDs
from whiskey_browser.ui.layout.build_filter_panel import build_filter_panel
from whiskey_browser.ui.layout.build_navbar import build_navbar
from whiskey_browser.ui.layout.build_table_panel import build_table_panel


def build_layout(ctx: AppConfig):
    default_collection = ctx.collection(ctx.default_collection)

    navbar = build_navbar(ctx.collection_names, ctx.global_config, ctx.default_collection)
    filter_panel = build_filter_panel(default_collection)
    table_panel = build_table_panel()

    return dbc.Container(
        [
            dcc.Store(id=IDs.Store.BROWSER_STATE, data=BrowserState().to_dict()),
            navbar,
            dbc.Row(
                [
                    dbc.Col(filter_panel, width=12, lg=3),
                    dbc.Col(table_panel, width=12, lg=9),
                ],
                className="g-3",
            ),
        ],
        fluid=True,
    )
