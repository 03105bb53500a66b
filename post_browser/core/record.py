from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from .exceptions import RecordSchemaError


class FilterField(Enum):
    """Which record attribute a search term is matched against."""

    TITLE = "title"
    ID = "id"

    @classmethod
    def parse(cls, value: Union[FilterField, str]) -> FilterField:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown filter field '{value}'") from None


@dataclass(frozen=True)
class Record:
    """
    A single post as returned by the data source.

    Fields:

    - id: unique, caller-assigned identifier
    - title: short heading shown on the card
    - body: free text shown under the title
    - owner_id: id of the owning user (``userId`` on the wire)
    """

    id: int
    title: str
    body: str
    owner_id: int

    def matches(self, term: str, field: FilterField) -> bool:
        if field is FilterField.TITLE:
            return term.lower() in self.title.lower()
        # Partial numeric matches are intended: "1" matches 1, 10, 21, 100
        return term in str(self.id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "userId": self.owner_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Record:
        if not isinstance(data, dict):
            raise RecordSchemaError(f"Record must be an object, got {type(data).__name__}")

        missing = [k for k in ("id", "title", "body", "userId") if k not in data]
        if missing:
            raise RecordSchemaError(f"Record is missing keys: {', '.join(missing)}")

        for key in ("id", "userId"):
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, int):
                raise RecordSchemaError(f"Record '{key}' must be an integer, got {value!r}")

        for key in ("title", "body"):
            if not isinstance(data[key], str):
                raise RecordSchemaError(f"Record '{key}' must be a string, got {data[key]!r}")

        return cls(
            id=data["id"],
            title=data["title"],
            body=data["body"],
            owner_id=data["userId"],
        )
