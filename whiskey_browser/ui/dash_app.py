from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from whiskey_browser.config.loader import load_collection_registry
from whiskey_browser.services.collection_service import CollectionManager
from whiskey_browser.ui.layout.build_layout import build_layout
from whiskey_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from whiskey_browser.ui.callbacks.callbacks_table import register_table_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config, cfg_by_name = load_collection_registry(config_root)
    if not cfg_by_name:
        raise RuntimeError("No collection configs were loaded from config")

    # 2) Lazy collection access
    collection_manager = CollectionManager(cfg_by_name, data_root=global_config.data_root)
    collection_names = collection_manager.names()

    # 3) Choose Default Collection
    default_name = global_config.default_collection
    if default_name not in cfg_by_name:
        if default_name is not None:
            logger.warning(
                "Configured default collection not found; using first available",
                extra={"default_collection": default_name},
            )
        default_name = collection_names[0]

    # 4) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        collection_names=collection_names,
        collection_by_name=collection_manager,
        default_collection=default_name,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
        suppress_callback_exceptions=True,
    )

    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_table_callbacks(app, ctx)

    return app
