from __future__ import annotations

from typing import Callable

import pandas as pd
import plotly.graph_objects as go

from art_browser.core.aggregate import by_count_desc, group_counts, to_frame
from art_browser.core.base_view import BaseView
from art_browser.core.records import Record
from art_browser.core.view_state import ViewState
from art_browser.views.bar_chart import render_bar_chart


class CategoryCountView(BaseView):
    """
    Ranking of records per category, biggest first.

    Subclasses set id, label and key_func. "Unknown" is an ordinary
    category here.
    """

    key_func: Callable[[Record], str] = None

    def compute_data(self, state: ViewState) -> pd.DataFrame:
        ds = self.filtered_dataset(state)
        counts = group_counts(ds, self.key_func)
        return to_frame(by_count_desc(counts))

    def render_figure(self, data: pd.DataFrame, state: ViewState) -> go.Figure:
        return render_bar_chart(data, self.label)
