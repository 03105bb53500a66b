from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from post_browser.core.list_view_state import DEFAULT_PAGE_SIZE
from post_browser.services.data_source import DEFAULT_SOURCE_URL, DEFAULT_TIMEOUT


@dataclass(frozen=True)
class AppSettings:
    """
    Parsed global.json.

    - source_url: REST endpoint returning the post list
    - source_file: optional local JSON file used instead of source_url
    - page_size: posts per page
    - request_timeout: socket timeout in seconds for the single fetch
    - login_delay: seconds the mock login waits before issuing a token
    """
    ui_title: str = "Dashboard"
    subtitle: str = "Posts browser"
    source_url: str = DEFAULT_SOURCE_URL
    source_file: Optional[Path] = None
    page_size: int = DEFAULT_PAGE_SIZE
    request_timeout: float = DEFAULT_TIMEOUT
    login_delay: float = 1.0
