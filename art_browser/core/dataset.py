from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Tuple

from .decades import decade_of
from .filtering import ALL_DECADES, filter_by_decade
from .geo import parse_geo_point
from .records import Record

if TYPE_CHECKING:
    from .view_state import ViewState


class Dataset:
    """
    The in-memory public art dataset.

    Holds the raw, normalised records for the lifetime of the app. Filtered
    views are new Dataset objects sharing the same Record instances; the
    raw Dataset itself is never modified.
    """

    MAX_SUBSET_CACHE = 64

    def __init__(
        self,
        name: str,
        records: Iterable[Record],
        file_path: Optional[Path] = None,
    ) -> None:
        self.name = name
        self.records: Tuple[Record, ...] = tuple(records)
        self.file_path = file_path

        # decade label -> filtered Dataset
        self._subset_cache: Dict[str, Dataset] = {}

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, n_records={len(self.records)})"

    # -------------------------------------------------------------------------
    # Summaries for the UI
    # -------------------------------------------------------------------------
    def decades(self) -> List[str]:
        """Distinct decade labels observed in the data, sorted as text."""
        return sorted({decade_of(r.year_of_installation) for r in self.records})

    def n_located(self) -> int:
        """How many records carry a usable geo point."""
        return sum(1 for r in self.records if parse_geo_point(r.geo_point_2d) is not None)

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------
    def subset_for_decade(self, decade: str) -> Dataset:
        """
        Return the records installed in `decade`, in original order.

        "All" returns this Dataset unchanged.
        """
        if decade == ALL_DECADES:
            return self

        cached = self._subset_cache.get(decade)
        if cached is not None:
            return cached

        subset = Dataset(
            name=self.name,
            records=filter_by_decade(self.records, decade),
            file_path=self.file_path,
        )

        if len(self._subset_cache) >= self.MAX_SUBSET_CACHE:
            self._subset_cache.clear()
        self._subset_cache[decade] = subset
        return subset

    def subset_for_state(self, state: ViewState) -> Dataset:
        return self.subset_for_decade(state.decade)
