from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
import plotly.graph_objs as go
from dash import Input, Output, State, no_update

from art_browser.core.controller import RenderResult, ViewController
from art_browser.ui.callbacks.callbacks_utils import safe_view_state
from art_browser.ui.ids import IDs
from art_browser.ui.layout.build_plot_panel import HIDDEN, VISIBLE
from art_browser.views.map_view import map_is_initialized, marker_patch

if TYPE_CHECKING:
    from art_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

# Returns, in order:
#   chart figure, chart container style, map figure, map container style,
#   resize timer n_intervals, resize timer disabled
RenderOutputs = Tuple[Any, dict, Any, dict, Any, bool]


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def _error_outputs(details: str) -> RenderOutputs:
    return _error_figure(details), VISIBLE, no_update, HIDDEN, no_update, True


def build_render_outputs(result: RenderResult, current_map_figure: Optional[dict]) -> RenderOutputs:
    """
    Pure helper: decide what each surface receives for a render.

    - chart views replace the chart figure, hide the map and disarm any pending resize
    - the first map render sends the whole base map
    - later map renders patch only the markers and arm the one-shot resize timer,
      because the map was measured while its container was hidden
    """
    if result.surface != "map":
        return result.figure, VISIBLE, no_update, HIDDEN, no_update, True

    if map_is_initialized(current_map_figure):
        return no_update, HIDDEN, marker_patch(result.data), VISIBLE, 0, False

    return no_update, HIDDEN, result.figure, VISIBLE, no_update, True


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Main surfaces: ViewState -> chart or map
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.CHART_GRAPH, "figure"),
        Output(IDs.Control.CHART_CONTAINER, "style"),
        Output(IDs.Control.MAP_GRAPH, "figure"),
        Output(IDs.Control.MAP_CONTAINER, "style"),
        Output(IDs.Control.MAP_RESIZE_TIMER, "n_intervals"),
        Output(IDs.Control.MAP_RESIZE_TIMER, "disabled"),
        Input(IDs.Store.VIEW_STATE, "data"),
        State(IDs.Control.MAP_GRAPH, "figure"),
    )
    def update_surfaces_from_state(state_data: dict[str, Any] | None, map_figure: dict | None):
        state = safe_view_state(state_data)

        try:
            controller = ViewController(ctx.dataset, ctx.registry, state)

            logger.info(
                "render_start",
                extra={
                    "view_id": state.view_id,
                    "decade": state.decade,
                    "dataset": ctx.dataset.name,
                },
            )

            result = controller.render()
            return build_render_outputs(result, map_figure)

        except Exception:
            logger.exception(
                "Error in update_surfaces_from_state",
                extra={"view_state": state.to_dict()},
            )
            return _error_outputs(
                "The app hit an unexpected error. "
                "If this keeps happening, grab the logs and open an issue."
            )

    # ---------------------------------------------------------
    # Deferred map re-measure: runs in the browser when the timer fires,
    # then disarms the timer.
    # ---------------------------------------------------------
    app.clientside_callback(
        """
        function(n) {
            if (!n) {
                return window.dash_clientside.no_update;
            }
            var graph = document.getElementById('%s');
            var plot = null;
            if (graph) {
                plot = graph.classList.contains('js-plotly-plot')
                    ? graph
                    : graph.querySelector('.js-plotly-plot');
            }
            if (plot && window.Plotly) {
                window.Plotly.Plots.resize(plot);
            }
            return true;
        }
        """ % IDs.Control.MAP_GRAPH,
        Output(IDs.Control.MAP_RESIZE_TIMER, "disabled", allow_duplicate=True),
        Input(IDs.Control.MAP_RESIZE_TIMER, "n_intervals"),
        prevent_initial_call=True,
    )
