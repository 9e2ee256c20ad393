from __future__ import annotations

import math

import pandas as pd
import plotly.graph_objects as go

BAR_COLOUR = "#3498db"

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def _tick_increment(start: float, stop: float, count: int) -> float:
    # Positive: step size. Negative: the inverse of a fractional step.
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return factor * 10 ** power
    return -(10 ** -power) / factor


def nice_upper_bound(max_value: float, count: int = 10) -> float:
    """
    Round the top of a [0, max_value] axis up to a human-friendly value.

    Uses the same 1/2/5 x 10^n tick steps as a d3 linear scale's nice(),
    so e.g. 7 stays 7, 23 becomes 24 and 87 becomes 90.
    """
    if max_value <= 0:
        return 0
    start, stop = 0.0, float(max_value)
    prestep = None
    for _ in range(10):
        step = _tick_increment(start, stop, count)
        if step == prestep or step == 0 or not math.isfinite(step):
            break
        if step > 0:
            start = math.floor(start / step) * step
            stop = math.ceil(stop / step) * step
        else:
            start = math.ceil(start * step) / step
            stop = math.floor(stop * step) / step
        prestep = step
    return stop


def render_bar_chart(data: pd.DataFrame, label: str) -> go.Figure:
    """
    Bar chart of grouped counts.

    :param data: frame with 'key' and 'count' columns, already in display order
    :param label: human readable name of the grouping, e.g. "Neighbourhood"
    :return: a new figure; nothing is carried over from earlier charts
    """
    if data is None or data.empty:
        fig = go.Figure()
        fig.update_layout(
            title="No public art matches the current filter",
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig

    keys = [str(k) for k in data["key"]]
    counts = [int(c) for c in data["count"]]

    fig = go.Figure(
        go.Bar(
            x=keys,
            y=counts,
            marker_color=BAR_COLOUR,
            hovertemplate=f"<b>{label}:</b> %{{x}}<br><b>Count:</b> %{{y}}<extra></extra>",
        )
    )

    fig.update_xaxes(
        type="category",
        categoryorder="array",
        categoryarray=keys,
        tickangle=-45,
        title_text=label,
    )
    fig.update_yaxes(
        range=[0, nice_upper_bound(max(counts))],
        title_text="Count",
    )
    fig.update_layout(
        title={"text": f"Public Art by {label}", "x": 0.5, "font": {"size": 18}},
        bargap=0.2,
        hovermode="closest",
        height=600,
        margin=dict(l=100, r=20, t=60, b=100),
    )
    return fig
