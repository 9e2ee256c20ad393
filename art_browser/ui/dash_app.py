from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from art_browser.config.loader import load_global_config
from art_browser.config.model import GlobalConfig
from art_browser.core.dataset_loader import load_dataset
from art_browser.core.exceptions import ConfigError
from art_browser.core.view_registry import ViewRegistry
from art_browser.ui.layout.build_layout import build_layout
from art_browser.ui.callbacks.callbacks_render import register_render_callbacks
from art_browser.ui.callbacks.callbacks_sync import register_sync_callbacks

logger = logging.getLogger(__name__)


def build_view_registry(global_config: GlobalConfig) -> ViewRegistry:
    from art_browser.views import (
        NeighbourhoodView,
        TypeView,
        DecadeView,
        MapView,
    )

    registry = ViewRegistry()
    registry.register(NeighbourhoodView)
    registry.register(TypeView)
    registry.register(DecadeView)
    registry.register(MapView.with_config(global_config.map))
    return registry


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)
    if global_config.data_file is None:
        raise ConfigError(
            f"No data_file configured in {config_root / 'global.json'} "
            "and ART_BROWSER_DATA_FILE is not set"
        )

    # 2) Load the dataset once; a failure here stops start-up
    dataset = load_dataset(
        global_config.data_file,
        delimiter=global_config.delimiter,
    )

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        dataset=dataset,
        registry=build_view_registry(global_config),
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_sync_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"dataset": dataset.name, "n_records": len(dataset)},
    )
    return app
