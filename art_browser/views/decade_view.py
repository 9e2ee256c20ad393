from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from art_browser.core.aggregate import by_key_asc, decade_key, group_counts, to_frame
from art_browser.core.base_view import BaseView
from art_browser.core.decades import UNKNOWN_DECADE
from art_browser.core.view_state import YEAR_VIEW, ViewState
from art_browser.views.bar_chart import render_bar_chart


class DecadeView(BaseView):
    """
    Installations per decade, in chronological order.

    Records without a usable year are left out of this trend, although the
    category views still count them under "Unknown".
    """

    id = YEAR_VIEW
    label = "Decade"

    def compute_data(self, state: ViewState) -> pd.DataFrame:
        ds = self.filtered_dataset(state)
        counts = [gc for gc in group_counts(ds, decade_key) if gc.key != UNKNOWN_DECADE]
        # "1980s" < "1990s" < "2000s" as text as long as years have four digits
        return to_frame(by_key_asc(counts))

    def render_figure(self, data: pd.DataFrame, state: ViewState) -> go.Figure:
        return render_bar_chart(data, self.label)
