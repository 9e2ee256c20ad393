from __future__ import annotations

import logging
from typing import Any, Optional

from art_browser.core.events import Event, FilterChanged, ViewSelected
from art_browser.core.view_state import ViewState
from art_browser.ui.ids import IDs

logger = logging.getLogger(__name__)


def safe_view_state(data: object) -> ViewState:
    """Parse the store contents, falling back to the default selection."""
    if not isinstance(data, dict) or not data:
        return ViewState()
    try:
        return ViewState.from_dict(data)
    except ValueError:
        logger.warning("Invalid view-state in store, resetting: %r", data)
        return ViewState()


def event_from_trigger(triggered_id: Any, decade: Optional[str]) -> Optional[Event]:
    """
    Translate whatever fired the sync callback into a controller event.

    View buttons use pattern-matching ids ({"type": "view-button", "index": view_id});
    the decade dropdown has a plain string id.
    """
    if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.VIEW_BUTTON:
        return ViewSelected(view_id=triggered_id["index"])
    if triggered_id == IDs.Control.DECADE_SELECT:
        return FilterChanged(decade=decade)
    return None
