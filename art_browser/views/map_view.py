from __future__ import annotations

from typing import Any, Dict, Optional, Type

import pandas as pd
import plotly.graph_objects as go
from dash import Patch

from art_browser.config.model import MapConfig
from art_browser.core.base_view import BaseView
from art_browser.core.geo import parse_geo_point
from art_browser.core.view_state import MAP_VIEW, ViewState

MARKER_TRACE_INDEX = 0
MARKER_SIZE = 8
MARKER_COLOUR = "orange"
MARKER_OPACITY = 0.7

# Constant uirevision: Plotly keeps the user's pan/zoom across figure updates
MAP_UIREVISION = "keep-view"


def base_map_figure(map_config: MapConfig) -> go.Figure:
    """
    The map surface: base tiles with attribution, the default viewport and
    an empty marker overlay trace. Built once per page; later updates only
    touch the marker trace (see marker_patch).
    """
    fig = go.Figure(
        go.Scattermap(
            lon=[],
            lat=[],
            mode="markers",
            marker={"size": MARKER_SIZE, "color": MARKER_COLOUR, "opacity": MARKER_OPACITY},
            name="Public art",
            hoverinfo="skip",
        )
    )
    fig.update_layout(
        map={
            "style": "white-bg",
            "center": {"lat": map_config.center_lat, "lon": map_config.center_lon},
            "zoom": map_config.zoom,
            "layers": [
                {
                    "below": "traces",
                    "sourcetype": "raster",
                    "source": [map_config.tile_url],
                    "sourceattribution": map_config.attribution,
                }
            ],
        },
        uirevision=MAP_UIREVISION,
        showlegend=False,
        height=600,
        margin={"l": 0, "r": 0, "t": 0, "b": 0},
    )
    return fig


def marker_patch(data: pd.DataFrame) -> Patch:
    """Replace only the marker overlay of an already rendered map."""
    patch = Patch()
    patch["data"][MARKER_TRACE_INDEX]["lon"] = data["lon"].tolist()
    patch["data"][MARKER_TRACE_INDEX]["lat"] = data["lat"].tolist()
    return patch


def map_is_initialized(figure: Optional[Dict[str, Any]]) -> bool:
    """True once the map graph holds the base map (it always has the marker trace)."""
    if not figure:
        return False
    return bool(figure.get("data"))


class MapView(BaseView):
    """
    Point map of the filtered records.

    Records whose geo point doesn't parse are skipped without comment.
    """

    id = MAP_VIEW
    label = "Map"
    surface = "map"
    map_config: MapConfig = MapConfig()

    @classmethod
    def with_config(cls, map_config: MapConfig) -> Type[MapView]:
        """A MapView subclass bound to the given map settings, for the ViewRegistry."""
        return type(cls.__name__, (cls,), {"map_config": map_config})

    def compute_data(self, state: ViewState) -> pd.DataFrame:
        ds = self.filtered_dataset(state)
        points = [parse_geo_point(r.geo_point_2d) for r in ds]
        points = [p for p in points if p is not None]
        return pd.DataFrame(
            {
                "lon": [p.longitude for p in points],
                "lat": [p.latitude for p in points],
            }
        )

    def render_figure(self, data: pd.DataFrame, state: ViewState) -> go.Figure:
        fig = base_map_figure(self.map_config)
        fig.update_traces(
            lon=data["lon"].tolist(),
            lat=data["lat"].tolist(),
            selector={"type": "scattermap"},
        )
        return fig
