from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import plotly.graph_objs as go

from .dataset import Dataset
from .view_state import ViewState

logger = logging.getLogger(__name__)


class BaseView(ABC):
    """
    Abstract base class for all views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally and stored in ViewState.view_id
    - expose a 'label' - used for buttons and chart titles
    - expose a 'surface' - "chart" or "map", which container the figure goes in
    - implement 'compute_data' - used to compute the data given the current ViewState
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None
    surface: str = "chart"

    def __init__(self, dataset: Dataset):
        self.dataset = dataset

    @abstractmethod
    def compute_data(self, state: ViewState) -> Any:
        """
        Compute the data given the current ViewState
        :param state: the current ViewState - which decade the user filtered to
        :return: data: a dataframe containing the data to plot
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, state: ViewState) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by compute_data()
        :param state: the current ViewState
        :return: the Plotly figure for these parameters
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def filtered_dataset(self, state: ViewState) -> Dataset:
        """
        Return this view's Dataset filtered according to the given ViewState.

        All views should call this instead of filtering records directly,
        so if we ever need to change the filtering behaviour, we do it in one place.
        """
        return self.dataset.subset_for_state(state)

    def timed_compute(self, state: ViewState) -> Any:
        start = time.perf_counter()
        data = self.compute_data(state)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.debug(
            "compute_data finished",
            extra={"view_id": self.id, "decade": state.decade, "elapsed_ms": round(elapsed_ms, 2)},
        )
        return data

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
