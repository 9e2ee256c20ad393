from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ViewSelected:
    """User picked one of the view tabs."""
    view_id: str


@dataclass(frozen=True)
class FilterChanged:
    """User picked a decade in the filter dropdown ("All" clears the filter)."""
    decade: str


Event = Union[ViewSelected, FilterChanged]
