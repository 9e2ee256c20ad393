from __future__ import annotations

import re
from typing import Optional

UNKNOWN_DECADE = "Unknown"

# Leading ASCII integer, surrounding whitespace and trailing junk allowed ("1987 (approx)")
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_year(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def decade_of(value: Optional[str]) -> str:
    """
    Bucket a raw year into its decade label, e.g. "1987" -> "1980s".

    Anything without a leading integer maps to UNKNOWN_DECADE.
    """
    year = parse_year(value)
    if year is None:
        return UNKNOWN_DECADE
    return f"{(year // 10) * 10}s"
