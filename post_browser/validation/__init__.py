from .credentials import validate_credentials
from .errors import ValidationError, ValidationIssue

__all__ = ["validate_credentials", "ValidationError", "ValidationIssue"]
