"""
Core domain layer: records, filter fields and the list view state
"""

from .record import FilterField, Record
from .list_view_state import ListViewState, PageSummary

__all__ = ["Record", "FilterField", "ListViewState", "PageSummary"]
