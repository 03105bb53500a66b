from .auth_service import AuthService, Session, resolve_route
from .data_source import HttpRecordSource, JsonFileRecordSource, RecordSource
from .listing_service import ListingService, LoadResult

__all__ = [
    "AuthService",
    "Session",
    "resolve_route",
    "RecordSource",
    "HttpRecordSource",
    "JsonFileRecordSource",
    "ListingService",
    "LoadResult",
]
