from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from post_browser.ui.ids import IDs
from post_browser.ui.layout.build_navbar import build_navbar

if TYPE_CHECKING:
    from post_browser.ui.config import AppConfig


def build_layout(ctx: "AppConfig"):
    return dbc.Container(
        fluid=True,
        className="pb-root",
        children=[
            build_navbar(ctx.settings),

            dcc.Location(id=IDs.Control.URL, refresh=False),

            # Mirrors browser local storage: the token survives page reloads
            dcc.Store(id=IDs.Store.AUTH_TOKEN, storage_type="local"),

            html.Div(id=IDs.Control.PAGE_CONTENT),
        ],
    )
