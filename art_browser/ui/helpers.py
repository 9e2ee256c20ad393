from __future__ import annotations

from typing import List

from art_browser.core.dataset import Dataset
from art_browser.core.filtering import ALL_DECADES


def get_decade_options(dataset: Dataset) -> List[dict]:
    """'All' followed by every decade seen in the data (including 'Unknown')."""
    options = [{"label": ALL_DECADES, "value": ALL_DECADES}]
    options.extend({"label": d, "value": d} for d in dataset.decades())
    return options


def dataset_summary_text(dataset: Dataset) -> str:
    return f"{len(dataset)} artworks · {dataset.n_located()} on the map"
