from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from art_browser.config.model import GlobalConfig, MapConfig
from art_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DATA_FILE_ENV = "ART_BROWSER_DATA_FILE"


def _resolve(root: Path, raw: Optional[str]) -> Optional[Path]:
    """
    Resolve a path from config:
    - Absolute paths are used as-is.
    - Relative paths are resolved relative to the config root directory.
    """
    if raw is None:
        return None
    path = Path(raw)
    if path.is_absolute():
        return path
    return (root / path).resolve()


def _parse_map_config(raw: Dict[str, Any]) -> MapConfig:
    defaults = MapConfig()
    try:
        return MapConfig(
            center_lat=float(raw.get("center_lat", defaults.center_lat)),
            center_lon=float(raw.get("center_lon", defaults.center_lon)),
            zoom=float(raw.get("zoom", defaults.zoom)),
            tile_url=str(raw.get("tile_url", defaults.tile_url)),
            attribution=str(raw.get("attribution", defaults.attribution)),
            resize_delay_ms=int(raw.get("resize_delay_ms", defaults.resize_delay_ms)),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid 'map' section in global.json: {e}") from e


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json
            data/
                public-art.csv

    global.json keys (all optional):

    - ui_title: title for the navbar and browser tab
    - subtitle: text under the title
    - data_file: dataset path, relative paths resolved against root.
                 The ART_BROWSER_DATA_FILE env var takes precedence.
    - delimiter: field separator of the dataset file, defaults to ","
    - map: {center_lat, center_lon, zoom, tile_url, attribution, resize_delay_ms}

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not valid JSON or has bad values.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw_global = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Could not parse {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    raw_map = raw_global.get("map", {})
    if not isinstance(raw_map, dict):
        raise ConfigError("'map' in global.json must be an object")

    delimiter = raw_global.get("delimiter", ",")
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ConfigError(f"'delimiter' must be a single character, got {delimiter!r}")

    env_data_file = os.getenv(DATA_FILE_ENV)
    if env_data_file:
        data_file = Path(env_data_file)
    else:
        data_file = _resolve(root, raw_global.get("data_file"))

    defaults = GlobalConfig()
    config = GlobalConfig(
        ui_title=raw_global.get("ui_title", defaults.ui_title),
        subtitle=raw_global.get("subtitle", defaults.subtitle),
        data_file=data_file,
        delimiter=delimiter,
        map=_parse_map_config(raw_map),
    )

    logger.info(
        "Global config loaded",
        extra={"config_root": str(root), "data_file": str(config.data_file)},
    )
    return config
