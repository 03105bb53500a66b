from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List

import requests

from post_browser.core.exceptions import DataSourceUnavailable, RecordSchemaError
from post_browser.core.record import Record

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_URL = "https://jsonplaceholder.typicode.com/posts"
DEFAULT_TIMEOUT = 10.0


def parse_records(payload: Any) -> List[Record]:
    """
    Turn a decoded JSON payload into records.

    The whole payload is rejected if any entry is malformed; partial record
    sets are never returned.
    """
    if not isinstance(payload, list):
        raise DataSourceUnavailable(
            f"Expected a list of records, got {type(payload).__name__}"
        )
    try:
        return [Record.from_dict(item) for item in payload]
    except RecordSchemaError as e:
        raise DataSourceUnavailable(f"Malformed record payload: {e}") from e


class RecordSource(ABC):
    """
    Abstract interface for the external data source (REST endpoint, local file, etc.).
    """

    @abstractmethod
    def fetch_all(self) -> List[Record]:
        """
        Read the full ordered record set.

        Raises:
            DataSourceUnavailable: on any failure
        """
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass


class HttpRecordSource(RecordSource):
    """
    Reads records with a single GET request. No retry, no backoff.
    """

    def __init__(self, url: str = DEFAULT_SOURCE_URL, timeout: float = DEFAULT_TIMEOUT):
        self.url = url
        self.timeout = timeout

    @property
    def description(self) -> str:
        return self.url

    def fetch_all(self) -> List[Record]:
        try:
            response = requests.get(self.url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise DataSourceUnavailable(f"Request to {self.url} timed out") from e
        except requests.RequestException as e:
            raise DataSourceUnavailable(f"Request to {self.url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise DataSourceUnavailable(
                f"Request failed with status code {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise DataSourceUnavailable("Response body is not valid JSON") from e

        records = parse_records(payload)
        logger.info(
            "records_fetched",
            extra={"url": self.url, "status": response.status_code, "n_records": len(records)},
        )
        return records


class JsonFileRecordSource(RecordSource):
    """
    Reads the same payload shape from a local JSON file (offline demos).
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @property
    def description(self) -> str:
        return str(self.path)

    def fetch_all(self) -> List[Record]:
        try:
            with self.path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as e:
            raise DataSourceUnavailable(f"Could not read {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise DataSourceUnavailable(f"{self.path} is not valid JSON") from e

        return parse_records(payload)
