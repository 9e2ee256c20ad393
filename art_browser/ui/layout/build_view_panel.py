from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from art_browser.core.view_registry import ViewRegistry
from art_browser.core.view_state import ViewState
from art_browser.ui.ids import view_button_id


def build_view_panel(registry: ViewRegistry) -> dbc.Card:
    default_view_id = ViewState().view_id

    buttons = [
        dbc.Button(
            cls.label,
            id=view_button_id(cls.id),
            n_clicks=0,
            color="primary",
            outline=True,
            active=cls.id == default_view_id,
            className="me-1 mb-1",
        )
        for cls in registry.all_classes()
    ]

    return dbc.Card(
        [
            dbc.CardHeader("View", className="fw-semibold"),
            dbc.CardBody(
                [
                    dbc.ButtonGroup(buttons, vertical=True, className="w-100"),
                    html.Small(
                        "Group the artworks by neighbourhood, type or decade, or show them on a map.",
                        className="text-muted d-block mt-2",
                    ),
                ]
            ),
        ],
        className="pab-view-card mb-3",
    )
