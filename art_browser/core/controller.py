from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import plotly.graph_objs as go

from .dataset import Dataset
from .events import Event, FilterChanged, ViewSelected
from .view_registry import ViewRegistry
from .view_state import ViewState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    """What a render produced and where it should be shown."""
    view_id: str
    surface: str
    data: Any
    figure: go.Figure


class ViewController:
    """
    Owns the ViewState and turns user events into renders.

    Every view is reachable from every other; the decade filter is kept
    when switching views and the view is kept when changing the filter.
    Nothing rendered is cached: render() always re-derives the filtered
    data and grouped counts from the raw dataset.
    """

    def __init__(
        self,
        dataset: Dataset,
        registry: ViewRegistry,
        state: Optional[ViewState] = None,
    ) -> None:
        self.dataset = dataset
        self.registry = registry
        self._state = state or ViewState()

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def filtered(self) -> Dataset:
        return self.dataset.subset_for_state(self._state)

    def apply(self, event: Event) -> ViewState:
        if isinstance(event, ViewSelected):
            if event.view_id not in self.registry:
                raise ValueError(f"No view registered for '{event.view_id}'")
            self._state = self._state.with_view(event.view_id)
        elif isinstance(event, FilterChanged):
            self._state = self._state.with_decade(event.decade)
        else:
            raise TypeError(f"Unsupported event: {event!r}")

        logger.debug(
            "view_state_changed",
            extra={"event": type(event).__name__, **self._state.to_dict()},
        )
        return self._state

    def render(self) -> RenderResult:
        state = self._state
        view = self.registry.create(state.view_id, self.dataset)
        data = view.timed_compute(state)
        figure = view.render_figure(data, state)
        return RenderResult(
            view_id=view.id,
            surface=view.surface,
            data=data,
            figure=figure,
        )

    def dispatch(self, event: Event) -> RenderResult:
        self.apply(event)
        return self.render()
