"""
Config package for post_browser.

Responsible for:
- the settings model (AppSettings)
- loading global.json plus environment overrides (load_app_config)
"""

from .model import AppSettings
from .loader import load_app_config

__all__ = ["AppSettings", "load_app_config"]
