from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional

from .filtering import ALL_DECADES

NEIGHBOURHOOD_VIEW = "neighbourhood"
TYPE_VIEW = "type"
YEAR_VIEW = "year"
MAP_VIEW = "map"

VIEW_IDS = (NEIGHBOURHOOD_VIEW, TYPE_VIEW, YEAR_VIEW, MAP_VIEW)


@dataclass(frozen=True)
class ViewState:
    """
    The user's current selection.

    Fields:

    - view_id: which projection is shown (one of VIEW_IDS)
    - decade: decade label to filter on, or "All"

    Lives in a per-session dcc.Store as a plain dict; use to_dict/from_dict
    at that boundary. Transitions return a new ViewState.
    """

    view_id: str = NEIGHBOURHOOD_VIEW
    decade: str = ALL_DECADES

    def __post_init__(self) -> None:
        if not isinstance(self.view_id, str) or self.view_id not in VIEW_IDS:
            raise ValueError(f"Unknown view '{self.view_id}'")
        if not isinstance(self.decade, str) or not self.decade:
            raise ValueError("Decade filter must be a decade label or 'All'")

    def with_view(self, view_id: str) -> ViewState:
        return replace(self, view_id=view_id)

    def with_decade(self, decade: Optional[str]) -> ViewState:
        # A cleared dropdown means "no filter"
        return replace(self, decade=decade or ALL_DECADES)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> ViewState:
        data = data or {}
        return cls(
            view_id=data.get("view_id") or NEIGHBOURHOOD_VIEW,
            decade=data.get("decade") or ALL_DECADES,
        )
