from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from art_browser.core.dataset import Dataset
from art_browser.core.filtering import ALL_DECADES
from art_browser.ui.helpers import dataset_summary_text, get_decade_options
from art_browser.ui.ids import IDs


def build_filter_panel(dataset: Dataset) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div([
                        html.H5(
                            dataset.name,
                            id=IDs.Control.SIDEBAR_DATASET_NAME,
                            className="card-title",
                        ),
                        html.P(
                            dataset_summary_text(dataset),
                            id=IDs.Control.SIDEBAR_DATASET_META,
                            className="card-subtitle text-muted mb-3",
                        ),
                        html.Hr(),
                    ]),
                    html.Label("Installation decade", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.DECADE_SELECT,
                        options=get_decade_options(dataset),
                        value=ALL_DECADES,
                        clearable=False,
                        className="mb-3",
                    ),
                ]
            ),
        ],
        className="pab-sidebar",
    )
