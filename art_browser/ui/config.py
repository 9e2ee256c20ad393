from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from art_browser.config.model import GlobalConfig
from art_browser.core.dataset import Dataset
from art_browser.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Holds shared state for the Dash app: config, the loaded dataset and the
    view registry. Passed into layout + callback registration functions
    instead of using module-level globals. Per-user selection lives in the
    browser (ViewState store), never here.
    """
    config_root: Path
    global_config: GlobalConfig
    dataset: Optional[Dataset] = None
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.dataset is None:
            raise RuntimeError("AppConfig.dataset must be loaded.")
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
