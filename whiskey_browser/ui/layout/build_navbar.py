from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from whiskey_browser.config.model import GlobalConfig
from whiskey_browser.ui.ids import IDs


def build_navbar(
    collection_names: List[str],
    global_config: GlobalConfig,
    default_name: Optional[str],
) -> dbc.Navbar:
    title = global_config.ui_title

    if default_name is None and collection_names:
        default_name = collection_names[0]

    collection_options = [{"label": n, "value": n} for n in collection_names]

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.H2(title, className="mb-0"),
                html.Div(
                    [
                        html.Div("Active Collection", className="navbar-collection-title"),
                        dcc.Dropdown(
                            id=IDs.Control.COLLECTION_SELECT,
                            options=collection_options,
                            value=default_name,
                            clearable=False,
                            placeholder="Select collection",
                            className="wb-collection-dropdown mt-1",
                        ),
                    ],
                    className="ms-auto",
                    style={"minWidth": "280px", "maxWidth": "380px"},
                ),
            ],
        ),
        className="wb-navbar mb-3",
    )
