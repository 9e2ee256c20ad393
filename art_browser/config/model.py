from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

OSM_TILE_URL = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)


@dataclass(frozen=True)
class MapConfig:
    """
    Settings for the map surface.

    - center_lat / center_lon / zoom: the initial viewport (downtown Vancouver by default)
    - tile_url: raster tile template for the base layer
    - attribution: attribution text the tile provider requires
    - resize_delay_ms: delay before re-measuring the map after it is shown again
    """
    center_lat: float = 49.28
    center_lon: float = -123.12
    zoom: float = 13
    tile_url: str = OSM_TILE_URL
    attribution: str = OSM_ATTRIBUTION
    resize_delay_ms: int = 200


@dataclass
class GlobalConfig:
    ui_title: str = "Public Art Browser"
    subtitle: str = "Public art by neighbourhood, type and decade"
    data_file: Optional[Path] = None
    delimiter: str = ","
    map: MapConfig = field(default_factory=MapConfig)
