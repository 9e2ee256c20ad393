from __future__ import annotations

from typing import Callable, Dict, Iterable, List, NamedTuple, Sequence

import pandas as pd

from .decades import decade_of
from .records import UNKNOWN, Record


class GroupedCount(NamedTuple):
    key: str
    count: int


KeyFunc = Callable[[Record], str]


def neighbourhood_key(record: Record) -> str:
    return record.neighbourhood or UNKNOWN


def type_key(record: Record) -> str:
    return record.art_type or UNKNOWN


def decade_key(record: Record) -> str:
    return decade_of(record.year_of_installation)


def group_counts(records: Iterable[Record], key: KeyFunc) -> List[GroupedCount]:
    """
    Count records per key.

    One GroupedCount per distinct key, in the order keys are first seen.
    Empty input gives an empty list.
    """
    counts: Dict[str, int] = {}
    for record in records:
        k = key(record)
        counts[k] = counts.get(k, 0) + 1
    return [GroupedCount(k, n) for k, n in counts.items()]


def by_count_desc(counts: Sequence[GroupedCount]) -> List[GroupedCount]:
    """Largest groups first; ties keep their encounter order (sorted() is stable)."""
    return sorted(counts, key=lambda gc: gc.count, reverse=True)


def by_key_asc(counts: Sequence[GroupedCount]) -> List[GroupedCount]:
    return sorted(counts, key=lambda gc: gc.key)


def to_frame(counts: Sequence[GroupedCount]) -> pd.DataFrame:
    """Tabular form used by the chart views: columns 'key' and 'count'."""
    return pd.DataFrame(
        {
            "key": [gc.key for gc in counts],
            "count": [gc.count for gc in counts],
        }
    )
