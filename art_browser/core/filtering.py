from __future__ import annotations

from typing import Sequence, Tuple

from .decades import decade_of
from .records import Record

ALL_DECADES = "All"


def filter_by_decade(records: Sequence[Record], decade: str) -> Tuple[Record, ...]:
    """
    Narrow records to one decade bucket.

    ALL_DECADES returns every record. Otherwise keeps records whose
    installation year falls in `decade`, in their original order.
    """
    if decade == ALL_DECADES:
        return tuple(records)
    return tuple(r for r in records if decade_of(r.year_of_installation) == decade)
