from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import dash
from dash import Input, Output, State, no_update
from dash.exceptions import PreventUpdate

from post_browser.services.auth_service import AuthService, Session
from post_browser.ui.helpers import build_error_alert
from post_browser.ui.ids import IDs
from post_browser.validation.errors import ValidationError

if TYPE_CHECKING:
    from post_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "An error occurred during signup"


def handle_login(auth: AuthService, email: Optional[str], password: Optional[str]) -> tuple:
    """
    Run the mock login and map the outcome onto the login form outputs:
    (token, email_invalid, email_feedback, password_invalid, password_feedback, error_alert)
    """
    try:
        session = auth.login(email, password)
    except ValidationError as e:
        email_msgs = e.messages_for("email")
        password_msgs = e.messages_for("password")
        return (
            no_update,
            bool(email_msgs),
            email_msgs[0] if email_msgs else "",
            bool(password_msgs),
            password_msgs[0] if password_msgs else "",
            None,
        )
    except Exception:
        logger.exception("Mock login failed")
        return no_update, False, "", False, "", build_error_alert(LOGIN_FAILED_MESSAGE)

    return session.token, False, "", False, "", None


def handle_logout(auth: AuthService, token: object) -> Optional[str]:
    """Drop the session; the returned value is written to the token store."""
    return auth.logout(Session.from_token(token)).token


def register_auth_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Login form -> token
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.AUTH_TOKEN, "data", allow_duplicate=True),
        Output(IDs.Control.LOGIN_EMAIL, "invalid"),
        Output(IDs.Control.LOGIN_EMAIL_FEEDBACK, "children"),
        Output(IDs.Control.LOGIN_PASSWORD, "invalid"),
        Output(IDs.Control.LOGIN_PASSWORD_FEEDBACK, "children"),
        Output(IDs.Control.LOGIN_ERROR, "children"),
        Input(IDs.Control.LOGIN_SUBMIT, "n_clicks"),
        State(IDs.Control.LOGIN_EMAIL, "value"),
        State(IDs.Control.LOGIN_PASSWORD, "value"),
        prevent_initial_call=True,
    )
    def submit_login(n_clicks, email, password):
        if not n_clicks:
            raise PreventUpdate
        return handle_login(ctx.auth_service, email, password)

    # ---------------------------------------------------------
    # Logout -> clear token
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.AUTH_TOKEN, "data", allow_duplicate=True),
        Input(IDs.Control.LOGOUT_BTN, "n_clicks"),
        State(IDs.Store.AUTH_TOKEN, "data"),
        prevent_initial_call=True,
    )
    def logout(n_clicks, token):
        if not n_clicks:
            raise PreventUpdate
        return handle_logout(ctx.auth_service, token)
