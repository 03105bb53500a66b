from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from post_browser.core.exceptions import DataSourceUnavailable
from post_browser.core.list_view_state import DEFAULT_PAGE_SIZE, ListViewState
from post_browser.services.data_source import RecordSource

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Outcome of opening the listing: a loaded state or a terminal error message."""

    state: Optional[ListViewState] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.state is not None


class ListingService:
    """
    Opens the listing view: one read from the source per call, no retry.
    """

    def __init__(self, source: RecordSource, page_size: int = DEFAULT_PAGE_SIZE):
        self.source = source
        self.page_size = page_size

    def open_view(self) -> LoadResult:
        try:
            records = self.source.fetch_all()
        except DataSourceUnavailable as e:
            logger.warning(
                "load_failed",
                extra={"source": self.source.description, "error": str(e)},
            )
            return LoadResult(error=str(e) or "An unknown error occurred")

        state = ListViewState(page_size=self.page_size)
        state.load(records)
        logger.info(
            "records_loaded",
            extra={"source": self.source.description, "n_records": len(records)},
        )
        return LoadResult(state=state)
