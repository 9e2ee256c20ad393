from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

# Column names in the source CSV
NEIGHBOURHOOD_COL = "Neighbourhood"
TYPE_COL = "Type"
YEAR_COL = "YearOfInstallation"
GEO_COL = "geo_point_2d"

REQUIRED_COLUMNS = (NEIGHBOURHOOD_COL, TYPE_COL, YEAR_COL, GEO_COL)

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Record:
    """
    One public-art entry, normalised at load time.

    Fields:

    - neighbourhood: trimmed neighbourhood name, "Unknown" when blank
    - art_type: trimmed artwork type, "Unknown" when blank
    - year_of_installation: trimmed year text, None when absent
    - geo_point_2d: raw "lat,lon" text, None when absent
    """
    neighbourhood: str = UNKNOWN
    art_type: str = UNKNOWN
    year_of_installation: Optional[str] = None
    geo_point_2d: Optional[str] = None


def _text(value: object) -> Optional[str]:
    if value is None:
        return None
    # pandas hands back NaN for empty cells unless told otherwise
    if isinstance(value, float) and value != value:
        return None
    return str(value)


def _label(value: object) -> str:
    text = _text(value)
    text = text.strip() if text is not None else ""
    return text or UNKNOWN


def normalize_row(row: Mapping[str, object]) -> Record:
    """Build a Record from a CSV row mapping column name -> cell text."""
    year = _text(row.get(YEAR_COL))
    geo = _text(row.get(GEO_COL))
    return Record(
        neighbourhood=_label(row.get(NEIGHBOURHOOD_COL)),
        art_type=_label(row.get(TYPE_COL)),
        year_of_installation=year.strip() if year is not None else None,
        geo_point_2d=geo,
    )
