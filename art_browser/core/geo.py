from __future__ import annotations

import math
import re
from typing import NamedTuple, Optional

# Plain ASCII decimal, optional exponent. float() alone would also take "1_0" or non-ASCII digits.
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class Coordinate(NamedTuple):
    """A map position. Note the order: longitude first, like GeoJSON."""
    longitude: float
    latitude: float


def _to_finite_float(text: str) -> Optional[float]:
    text = text.strip()
    if not _DECIMAL.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def parse_geo_point(text: Optional[str]) -> Optional[Coordinate]:
    """
    Parse a "lat,lon" string into a Coordinate.

    Returns None when the value is absent, has no comma, does not split into
    exactly two parts, or either part is not a finite decimal number. Never
    raises: a missing coordinate is a normal outcome for this dataset.

    >>> parse_geo_point("49.28,-123.12")
    Coordinate(longitude=-123.12, latitude=49.28)
    """
    if not text or "," not in text:
        return None

    parts = text.split(",")
    if len(parts) != 2:
        return None

    lat = _to_finite_float(parts[0])
    lon = _to_finite_float(parts[1])
    if lat is None or lon is None:
        return None

    return Coordinate(longitude=lon, latitude=lat)
