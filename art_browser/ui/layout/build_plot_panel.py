from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from art_browser.config.model import MapConfig
from art_browser.ui.ids import IDs

HIDDEN = {"display": "none"}
VISIBLE = {"display": "block"}


def build_plot_panel(map_config: MapConfig) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Plot"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    # Chart and map share the panel; only one container is ever visible
                    html.Div(
                        id=IDs.Control.CHART_CONTAINER,
                        style=VISIBLE,
                        children=dcc.Loading(
                            type="default",
                            children=dcc.Graph(
                                id=IDs.Control.CHART_GRAPH,
                                style={"height": "650px"},
                                config={"responsive": True},
                            ),
                        ),
                    ),
                    html.Div(
                        id=IDs.Control.MAP_CONTAINER,
                        style=HIDDEN,
                        children=dcc.Graph(
                            id=IDs.Control.MAP_GRAPH,
                            style={"height": "650px"},
                            config={"responsive": True, "scrollZoom": True},
                        ),
                    ),
                    # One-shot timer armed when the map is shown again
                    dcc.Interval(
                        id=IDs.Control.MAP_RESIZE_TIMER,
                        interval=map_config.resize_delay_ms,
                        n_intervals=0,
                        max_intervals=1,
                        disabled=True,
                    ),
                    html.Div(
                        id=IDs.Control.STATUS_BAR,
                        className="text-muted small mt-2",
                    ),
                ],
                className="pab-main-body",
            ),
        ],
        className="pab-maincard",
    )
