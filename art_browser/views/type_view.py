from __future__ import annotations

from art_browser.core.aggregate import type_key
from art_browser.core.view_state import TYPE_VIEW
from art_browser.views.category_count_view import CategoryCountView


class TypeView(CategoryCountView):
    """Public art per artwork type (sculpture, mural, ...)."""

    id = TYPE_VIEW
    label = "Type"
    key_func = staticmethod(type_key)
