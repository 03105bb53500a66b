from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from post_browser.validation.credentials import validate_credentials
from post_browser.validation.errors import ValidationError

logger = logging.getLogger(__name__)

# Fixed demo token, there is no real identity provider behind the login page
MOCK_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJzdWIiOiIxIiwibmFtZSI6IkpvaG4gRG9lIiwiZW1haWwiOiJqb2huQGV4YW1wbGUuY29tIiwiaWF0IjoxNTE2MjM5MDIyfQ."
    "SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
)

AUTH_PATH = "/auth"
DASHBOARD_PATH = "/dashboard"


@dataclass(frozen=True)
class Session:
    """Explicit session input: the view only checks whether a token is present."""

    token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @classmethod
    def from_token(cls, raw: object) -> Session:
        return cls(token=raw if isinstance(raw, str) and raw else None)


class AuthService:
    """
    Mock login flow: validate the form, wait a moment, hand out the demo token.
    """

    def __init__(self, login_delay: float = 1.0, token: str = MOCK_TOKEN):
        self.login_delay = login_delay
        self.token = token

    def login(self, email: Optional[str], password: Optional[str]) -> Session:
        issues = validate_credentials(email, password)
        if issues:
            raise ValidationError(issues)

        if self.login_delay > 0:
            time.sleep(self.login_delay)

        logger.info("login_succeeded", extra={"token_issued": True})
        return Session(token=self.token)

    def logout(self, session: Session) -> Session:
        if session.is_authenticated:
            logger.info("logout")
        return Session()


def resolve_route(pathname: Optional[str], session: Session) -> str:
    """
    Decide which page to show for a URL path.

    The dashboard requires a session; anything unknown lands on the login page.
    """
    path = (pathname or "/").rstrip("/") or "/"
    if path == DASHBOARD_PATH:
        return DASHBOARD_PATH if session.is_authenticated else AUTH_PATH
    return AUTH_PATH
