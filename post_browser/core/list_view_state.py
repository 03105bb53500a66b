from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Union

from .record import FilterField, Record

DEFAULT_PAGE_SIZE = 5


@dataclass(frozen=True)
class PageSummary:
    """1-based inclusive display range for "Showing X-Y of Z"."""

    first_index: int
    last_index: int
    total_filtered: int


class ListViewState:
    """
    Turns a full record set plus the user's query into one bounded page.

    Stored state is the record set, the raw search term, the filter field and
    the current page. The filtered set is recomputed by every mutator that can
    change it; paging values are derived from it on each read.

    Any change to the record set, search term or filter field sends the view
    back to page 1. ``set_page`` only moves within the current filtered set and
    clamps out-of-range requests instead of raising.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {page_size!r}")

        self._page_size = page_size
        self._all_records: List[Record] = []
        self._filtered: List[Record] = []
        self._search_term = ""
        self._filter_field = FilterField.TITLE
        self._current_page = 1

    # ------------------------------------------------------------------
    # Stored state
    # ------------------------------------------------------------------
    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def all_records(self) -> List[Record]:
        return list(self._all_records)

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def filter_field(self) -> FilterField:
        return self._filter_field

    @property
    def current_page(self) -> int:
        return self._current_page

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def filtered_records(self) -> List[Record]:
        return list(self._filtered)

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(len(self._filtered) / self._page_size))

    def visible_page(self) -> List[Record]:
        start = (self._current_page - 1) * self._page_size
        return self._filtered[start:start + self._page_size]

    def summary(self) -> PageSummary:
        # An empty result reads "1-0 of 0"; the card grid shows "No Data found"
        last = self._current_page * self._page_size
        total = len(self._filtered)
        return PageSummary(
            first_index=last - self._page_size + 1,
            last_index=min(last, total),
            total_filtered=total,
        )

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def load(self, records: Iterable[Record]) -> None:
        self._all_records = list(records)
        self._recompute()

    def set_search_term(self, term: str) -> None:
        self._search_term = term
        self._recompute()

    def set_filter_field(self, field: Union[FilterField, str]) -> None:
        self._filter_field = FilterField.parse(field)
        self._recompute()

    def set_page(self, page: int) -> None:
        self._current_page = min(max(1, int(page)), self.total_pages)

    def next_page(self) -> None:
        self.set_page(self._current_page + 1)

    def previous_page(self) -> None:
        self.set_page(self._current_page - 1)

    def _recompute(self) -> None:
        term = self._search_term
        if term.strip() == "":
            self._filtered = list(self._all_records)
        else:
            self._filtered = [r for r in self._all_records if r.matches(term, self._filter_field)]
        self._current_page = 1

    # ------------------------------------------------------------------
    # Serialization (dcc.Store round trip)
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "records": [r.to_dict() for r in self._all_records],
            "search_term": self._search_term,
            "filter_field": self._filter_field.value,
            "current_page": self._current_page,
            "page_size": self._page_size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ListViewState:
        state = cls(page_size=int(data.get("page_size", DEFAULT_PAGE_SIZE)))
        state._all_records = [Record.from_dict(r) for r in data.get("records", [])]
        state._search_term = str(data.get("search_term", ""))
        state._filter_field = FilterField.parse(data.get("filter_field", FilterField.TITLE.value))
        state._recompute()
        state.set_page(data.get("current_page", 1))
        return state
