from __future__ import annotations

import logging

import pytest

from post_browser.services.auth_service import (
    AUTH_PATH,
    DASHBOARD_PATH,
    MOCK_TOKEN,
    AuthService,
    Session,
    resolve_route,
)
from post_browser.validation.errors import ValidationError


def test_login_issues_mock_token():
    session = AuthService(login_delay=0).login("john@example.com", "secret1!")

    assert session.is_authenticated
    assert session.token == MOCK_TOKEN


def test_login_waits_configured_delay(monkeypatch):
    slept = []
    monkeypatch.setattr("post_browser.services.auth_service.time.sleep", slept.append)

    AuthService(login_delay=1.0).login("john@example.com", "secret1!")

    assert slept == [1.0]


def test_login_rejects_invalid_form_with_all_issues():
    with pytest.raises(ValidationError) as excinfo:
        AuthService(login_delay=0).login("not-an-email", "abc")

    assert excinfo.value.messages_for("email") == ["Please enter a valid email address"]
    assert "Password must be at least 6 characters" in excinfo.value.messages_for("password")


def test_logout_clears_session():
    session = AuthService(login_delay=0).logout(Session(token=MOCK_TOKEN))

    assert not session.is_authenticated


@pytest.mark.parametrize("raw", [None, "", 0, {"token": "x"}])
def test_session_from_token_without_string_is_anonymous(raw):
    assert not Session.from_token(raw).is_authenticated


def test_dashboard_requires_session():
    assert resolve_route("/dashboard", Session()) == AUTH_PATH
    assert resolve_route("/dashboard/", Session(token="t")) == DASHBOARD_PATH


@pytest.mark.parametrize("path", [None, "/", "/auth", "/elsewhere"])
def test_other_paths_go_to_login(path):
    assert resolve_route(path, Session(token="t")) == AUTH_PATH


def test_login_log_does_not_contain_email(caplog):
    caplog.set_level(logging.INFO, logger="post_browser.services.auth_service")

    AuthService(login_delay=0).login("john@example.com", "secret1!")

    assert [r.getMessage() for r in caplog.records] == ["login_succeeded"]
    for record in caplog.records:
        assert "john@example.com" not in str(vars(record))
