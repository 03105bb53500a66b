from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

from post_browser.core.exceptions import ConfigError

ENV_LOG_FORMAT = "POST_BROWSER_LOG_FORMAT"
ENV_LOG_LEVEL = "POST_BROWSER_LOG_LEVEL"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# JSON records use short keys; service `extra` fields (n_records, source,
# trigger, ...) are emitted alongside them unchanged.
JSON_RENAMED_FIELDS = {
    "asctime": "ts",
    "levelname": "level",
    "name": "logger",
    "message": "event",
}


def resolve_level(level: Optional[int] = None) -> int:
    """
    Pick the root level: explicit argument, then POST_BROWSER_LOG_LEVEL
    (a name such as "debug" or a number), then INFO.
    """
    if level is not None:
        return level

    raw = os.getenv(ENV_LOG_LEVEL, "").strip()
    if not raw:
        return logging.INFO
    if raw.isdigit():
        return int(raw)

    value = getattr(logging, raw.upper(), None)
    if not isinstance(value, int):
        raise ConfigError(f"{ENV_LOG_LEVEL} must be a logging level name, got {raw!r}")
    return value


def build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    return jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields=JSON_RENAMED_FIELDS,
        static_fields={"app": "post-browser"},
    )


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Install a single stream handler on the root logger.

    Format is JSON unless force_format or POST_BROWSER_LOG_FORMAT says "plain".
    Calling it again replaces the handler instead of stacking another one.
    """
    format_mode = (force_format or os.getenv(ENV_LOG_FORMAT, "json")).lower()

    root = logging.getLogger()
    root.setLevel(resolve_level(level))

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(format_mode))

    root.handlers.clear()
    root.addHandler(handler)

    # Dash's dev server logs every request through werkzeug at INFO
    if root.level > logging.DEBUG:
        logging.getLogger("werkzeug").setLevel(logging.WARNING)
