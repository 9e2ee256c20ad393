from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "ART_BROWSER_LOG_FORMAT"
LOG_FORMATS = ("json", "plain")

# Callers attach context through extra= (view_id, decade, n_records, elapsed_ms ...).
# The JSON formatter emits those as top-level keys next to these base fields.
_JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"
_JSON_RENAMES = {"asctime": "ts", "levelname": "level", "name": "logger"}
_PLAIN_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"


def _resolve_format(force_format: Optional[str]) -> str:
    raw = force_format if force_format is not None else os.getenv(LOG_FORMAT_ENV, "json")
    return raw.strip().lower()


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Send art browser logs to stderr, one record per line.

    "json" (the default) suits a deployed server where lines are shipped to a
    log store; "plain" reads better in a terminal while developing. The mode
    comes from force_format, else ART_BROWSER_LOG_FORMAT. Unrecognised
    values fall back to json with a warning.

    Calling it again replaces the previous handler.
    """
    format_mode = _resolve_format(force_format)

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    else:
        handler.setFormatter(
            jsonlogger.JsonFormatter(_JSON_FIELDS, rename_fields=_JSON_RENAMES)
        )

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    if format_mode not in LOG_FORMATS:
        logging.getLogger(__name__).warning(
            "Unknown log format %r, using json", format_mode
        )
