from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    code: str
    message: str


class ValidationError(Exception):
    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(f"{i.field}.{i.code}: {i.message}" for i in issues))

    def messages_for(self, field: str) -> list[str]:
        return [i.message for i in self.issues if i.field == field]
