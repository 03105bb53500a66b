from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from post_browser.config.model import AppSettings
from post_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_SOURCE_URL = "POST_BROWSER_SOURCE_URL"
ENV_PAGE_SIZE = "POST_BROWSER_PAGE_SIZE"


def _positive_int(raw: Any, key: str) -> int:
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise ConfigError(f"'{key}' must be an integer, got {raw!r}")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"'{key}' must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigError(f"'{key}' must be a positive integer, got {raw!r}")
    return value


def _float(raw: Any, key: str) -> float:
    if isinstance(raw, bool):
        raise ConfigError(f"'{key}' must be a number, got {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"'{key}' must be a number, got {raw!r}") from None


def _positive_float(raw: Any, key: str) -> float:
    value = _float(raw, key)
    if value <= 0:
        raise ConfigError(f"'{key}' must be greater than zero, got {raw!r}")
    return value


def _non_negative_float(raw: Any, key: str) -> float:
    value = _float(raw, key)
    if value < 0:
        raise ConfigError(f"'{key}' must not be negative, got {raw!r}")
    return value


def load_app_config(root: Path, environ: Optional[Mapping[str, str]] = None) -> AppSettings:
    """
    Load settings from a config directory.

    Expected structure:

        root/
            global.json

    global.json is optional; missing keys fall back to AppSettings defaults.
    Relative 'source_file' paths are resolved against the config root.

    Environment overrides (applied last):

    - POST_BROWSER_SOURCE_URL
    - POST_BROWSER_PAGE_SIZE

    :param root: Directory containing 'global.json'.
    :param environ: Environment mapping, defaults to os.environ.
    :return: An AppSettings instance.
    :raises ConfigError: if global.json is unreadable or holds invalid values.
    """
    root = Path(root)
    env = os.environ if environ is None else environ
    defaults = AppSettings()

    global_path = root / "global.json"
    raw: Dict[str, Any] = {}
    if global_path.is_file():
        try:
            with global_path.open() as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{global_path} is not valid JSON: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{global_path} must contain a JSON object")
    else:
        logger.info("No global.json found, using defaults", extra={"config_root": str(root)})

    source_file = raw.get("source_file")
    if source_file is not None:
        source_path = Path(source_file)
        if not source_path.is_absolute():
            source_path = (root / source_path).resolve()
        source_file = source_path

    source_url = env.get(ENV_SOURCE_URL) or raw.get("source_url", defaults.source_url)
    page_size_raw = env.get(ENV_PAGE_SIZE) or raw.get("page_size", defaults.page_size)

    settings = AppSettings(
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        source_url=source_url,
        source_file=source_file,
        page_size=_positive_int(page_size_raw, "page_size"),
        request_timeout=_positive_float(
            raw.get("request_timeout", defaults.request_timeout), "request_timeout"
        ),
        login_delay=_non_negative_float(raw.get("login_delay", defaults.login_delay), "login_delay"),
    )

    logger.info(
        "Loaded app config",
        extra={
            "config_root": str(root),
            "source": str(settings.source_file or settings.source_url),
            "page_size": settings.page_size,
        },
    )
    return settings
