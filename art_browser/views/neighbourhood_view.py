from __future__ import annotations

from art_browser.core.aggregate import neighbourhood_key
from art_browser.core.view_state import NEIGHBOURHOOD_VIEW
from art_browser.views.category_count_view import CategoryCountView


class NeighbourhoodView(CategoryCountView):
    """Public art per neighbourhood."""

    id = NEIGHBOURHOOD_VIEW
    label = "Neighbourhood"
    key_func = staticmethod(neighbourhood_key)
