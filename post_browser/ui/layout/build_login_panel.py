from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from post_browser.ui.ids import IDs


def build_login_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Login Form", className="fw-semibold pb-login-title"),
            dbc.CardBody(
                dcc.Loading(
                    [
                        html.Div(id=IDs.Control.LOGIN_ERROR),

                        html.Div(
                            [
                                dbc.Label("Email", html_for=IDs.Control.LOGIN_EMAIL),
                                dbc.Input(
                                    id=IDs.Control.LOGIN_EMAIL,
                                    type="email",
                                    placeholder="you@example.com",
                                ),
                                dbc.FormFeedback(
                                    id=IDs.Control.LOGIN_EMAIL_FEEDBACK,
                                    type="invalid",
                                ),
                            ],
                            className="mb-3",
                        ),
                        html.Div(
                            [
                                dbc.Label("Password", html_for=IDs.Control.LOGIN_PASSWORD),
                                dbc.Input(
                                    id=IDs.Control.LOGIN_PASSWORD,
                                    type="password",
                                    placeholder="password",
                                ),
                                dbc.FormFeedback(
                                    id=IDs.Control.LOGIN_PASSWORD_FEEDBACK,
                                    type="invalid",
                                ),
                            ],
                            className="mb-3",
                        ),

                        dbc.Button(
                            "Create account",
                            id=IDs.Control.LOGIN_SUBMIT,
                            color="secondary",
                            className="w-100",
                            n_clicks=0,
                        ),
                        html.Hr(),
                        html.Div(
                            "A Dash dashboard with form validation and a paginated post listing.",
                            className="text-center text-muted small",
                        ),
                    ]
                )
            ),
        ],
        className="pb-login-card mx-auto mt-5",
    )
