from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from post_browser.config.model import AppSettings
from post_browser.services.auth_service import AuthService
from post_browser.services.listing_service import ListingService


@dataclass
class AppConfig:
    """
    Shared state for the Dash app, passed into layout and callback
    registration functions instead of module-level globals.
    """
    config_root: Path
    settings: AppSettings

    listing_service: Optional[ListingService] = None
    auth_service: Optional[AuthService] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.listing_service is None:
            raise RuntimeError("AppConfig.listing_service must be initialized.")
        if self.auth_service is None:
            raise RuntimeError("AppConfig.auth_service must be initialized.")
