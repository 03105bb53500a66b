from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import dash
from dash import Input, Output, no_update

from post_browser.services.auth_service import AUTH_PATH, DASHBOARD_PATH, Session, resolve_route
from post_browser.ui.ids import IDs
from post_browser.ui.layout.build_dashboard_panel import build_dashboard_panel
from post_browser.ui.layout.build_login_panel import build_login_panel

if TYPE_CHECKING:
    from post_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def choose_target(pathname: Optional[str], token: object, trigger: Optional[str]) -> str:
    """
    Pick the page for this request.

    A token change means a login or logout just happened: go to the dashboard
    on login and back to the login page on logout. Otherwise honour the URL,
    subject to the session check.
    """
    session = Session.from_token(token)
    if trigger == IDs.Store.AUTH_TOKEN:
        return DASHBOARD_PATH if session.is_authenticated else AUTH_PATH
    return resolve_route(pathname, session)


def register_routing_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # URL + session -> page (redirects by rewriting the pathname)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PAGE_CONTENT, "children"),
        Output(IDs.Control.URL, "pathname"),
        Input(IDs.Control.URL, "pathname"),
        Input(IDs.Store.AUTH_TOKEN, "data"),
    )
    def route(pathname, token):
        trigger = dash.ctx.triggered_id
        target = choose_target(pathname, token, trigger)

        if target != pathname:
            logger.info("redirect", extra={"from": pathname, "to": target})

        if target == DASHBOARD_PATH:
            page = build_dashboard_panel(ctx.settings)
        else:
            page = build_login_panel()

        return page, (target if target != pathname else no_update)
