from __future__ import annotations

__all__ = ["IDs", "view_button_id"]


class IDs:
    class Store:
        VIEW_STATE = "view-state"

    class Control:
        # Sidebar
        DECADE_SELECT = "decade-select"
        SIDEBAR_DATASET_NAME = "sidebar-dataset-name"
        SIDEBAR_DATASET_META = "sidebar-dataset-meta"

        # Chart surface
        CHART_CONTAINER = "chart-container"
        CHART_GRAPH = "chart-graph"

        # Map surface
        MAP_CONTAINER = "map-container"
        MAP_GRAPH = "map-graph"
        MAP_RESIZE_TIMER = "map-resize-timer"

        # Status bar
        STATUS_BAR = "status-bar"

    class Pattern:
        # pattern-matching "type" strings
        VIEW_BUTTON = "view-button"


def view_button_id(view_id: str) -> dict:
    return {"type": IDs.Pattern.VIEW_BUTTON, "index": view_id}
