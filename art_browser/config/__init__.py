"""
Config package for art_browser.

Responsible for:
- config models (GlobalConfig, MapConfig)
- config I/O (load_global_config)
"""

from .model import GlobalConfig, MapConfig
from .loader import load_global_config

__all__ = ["GlobalConfig", "MapConfig", "load_global_config"]
