from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from art_browser.core.view_state import ViewState
from art_browser.ui.ids import IDs
from art_browser.ui.layout.build_filter_panel import build_filter_panel
from art_browser.ui.layout.build_navbar import build_navbar
from art_browser.ui.layout.build_plot_panel import build_plot_panel
from art_browser.ui.layout.build_view_panel import build_view_panel

if TYPE_CHECKING:
    from art_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    return dbc.Container(
        fluid=True,
        className="pab-root",
        children=[
            build_navbar(ctx.global_config),

            # Per-tab selection; memory storage, gone on reload
            dcc.Store(
                id=IDs.Store.VIEW_STATE,
                storage_type="memory",
                data=ViewState().to_dict(),
            ),

            dbc.Row(
                [
                    dbc.Col(
                        [
                            build_view_panel(ctx.registry),
                            build_filter_panel(ctx.dataset),
                        ],
                        md=3,
                        className="mt-3",
                    ),
                    dbc.Col(
                        build_plot_panel(ctx.global_config.map),
                        md=9,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
