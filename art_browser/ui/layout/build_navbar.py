from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from art_browser.config.model import GlobalConfig


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm pab-navbar",
    )
