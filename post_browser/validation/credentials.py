from __future__ import annotations

import re
from typing import List, Optional

from .errors import ValidationIssue

MIN_PASSWORD_LENGTH = 6

# HTML living standard "valid e-mail address"; the domain needs no dot
_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+\/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


def _validate_email(email: Optional[str]) -> List[ValidationIssue]:
    if not email:
        return [ValidationIssue("email", "required", "Email is required")]
    if not _EMAIL_RE.fullmatch(email):
        return [ValidationIssue("email", "invalid", "Please enter a valid email address")]
    return []


def _validate_password(password: Optional[str]) -> List[ValidationIssue]:
    if not password:
        return [ValidationIssue("password", "required", "Password is required")]

    rules = [
        (len(password) >= MIN_PASSWORD_LENGTH, "too_short",
         f"Password must be at least {MIN_PASSWORD_LENGTH} characters"),
        (re.search(r"[a-zA-Z]", password) is not None, "no_letter",
         "Password must contain at least one letter"),
        (re.search(r"[0-9]", password) is not None, "no_digit",
         "Password must contain at least one number"),
        (re.search(r"[^a-zA-Z0-9]", password) is not None, "no_special",
         "Password must contain at least one special character"),
    ]
    return [ValidationIssue("password", code, msg) for ok, code, msg in rules if not ok]


def validate_credentials(email: Optional[str], password: Optional[str]) -> List[ValidationIssue]:
    """
    Check the login form the way the sign-in page does.

    Returns every issue found (empty list when the form is valid) so the UI can
    show all messages at once.
    """
    return _validate_email(email) + _validate_password(password)
