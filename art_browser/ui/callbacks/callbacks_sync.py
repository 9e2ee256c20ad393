from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import ALL, Input, Output, State, exceptions, html

from art_browser.core.controller import ViewController
from art_browser.ui.callbacks.callbacks_utils import event_from_trigger, safe_view_state
from art_browser.ui.ids import IDs

if TYPE_CHECKING:
    from art_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _apply_trigger(ctx: AppConfig, triggered_id: Any, decade: Optional[str], state_data: Any) -> dict:
    """
    Pure helper: fold one UI trigger into the stored ViewState and return the new store contents.
    """
    event = event_from_trigger(triggered_id, decade)
    if event is None:
        raise exceptions.PreventUpdate

    controller = ViewController(ctx.dataset, ctx.registry, safe_view_state(state_data))
    new_state = controller.apply(event)

    logger.info(
        "view_state_updated",
        extra={"event": type(event).__name__, **new_state.to_dict()},
    )
    return new_state.to_dict()


def _status_text(ctx: AppConfig, state_data: Any) -> list:
    state = safe_view_state(state_data)

    view_label = state.view_id
    for cls in ctx.registry.all_classes():
        if cls.id == state.view_id:
            view_label = cls.label
            break

    n_visible = len(ctx.dataset.subset_for_state(state))
    return [
        html.Strong("View: "), view_label, " • ",
        html.Strong("Decade: "), state.decade, " • ",
        html.Strong("Showing: "), f"{n_visible} of {len(ctx.dataset)} artworks",
    ]


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI -> ViewState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Input({"type": IDs.Pattern.VIEW_BUTTON, "index": ALL}, "n_clicks"),
        Input(IDs.Control.DECADE_SELECT, "value"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def sync_view_state_from_ui(_clicks, decade, state_data):
        return _apply_trigger(ctx, dash.ctx.triggered_id, decade, state_data)

    # ---------------------------------------------------------
    # Highlight the active view button
    # ---------------------------------------------------------
    @app.callback(
        Output({"type": IDs.Pattern.VIEW_BUTTON, "index": ALL}, "active"),
        Input(IDs.Store.VIEW_STATE, "data"),
    )
    def update_active_button(state_data):
        state = safe_view_state(state_data)
        return [cls.id == state.view_id for cls in ctx.registry.all_classes()]

    # ---------------------------------------------------------
    # Status Bar (Pure UI reflection of State)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.VIEW_STATE, "data"),
    )
    def update_status_bar(state_data):
        return html.Span(_status_text(ctx, state_data))
