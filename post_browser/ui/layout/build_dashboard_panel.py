from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from post_browser.config.model import AppSettings
from post_browser.core.record import FilterField
from post_browser.ui.helpers import filter_field_options
from post_browser.ui.ids import IDs


def _build_header(settings: AppSettings) -> dbc.CardHeader:
    return dbc.CardHeader(
        [
            html.P(settings.ui_title, className="pb-dashboard-title mb-0"),
            dbc.DropdownMenu(
                label="Profile",
                children=[
                    dbc.DropdownMenuItem("My Account", header=True),
                    dbc.DropdownMenuItem(divider=True),
                    dbc.DropdownMenuItem("Logout", id=IDs.Control.LOGOUT_BTN, n_clicks=0),
                ],
                align_end=True,
                color="secondary",
            ),
        ],
        className="d-flex justify-content-between align-items-center",
    )


def _build_controls() -> dbc.Row:
    return dbc.Row(
        [
            dbc.Col(
                dbc.InputGroup(
                    [
                        dbc.Input(
                            id=IDs.Control.SEARCH_INPUT,
                            placeholder="Search...",
                            value="",
                            debounce=False,
                            type="text",
                        ),
                        dbc.Select(
                            id=IDs.Control.FILTER_SELECT,
                            options=filter_field_options(),
                            value=FilterField.TITLE.value,
                            className="pb-filter-select",
                        ),
                    ]
                ),
                md=6,
            ),
            dbc.Col(
                html.Div(id=IDs.Control.SUMMARY_TEXT, className="text-muted small text-md-end"),
                md=6,
                className="align-self-center",
            ),
        ],
        className="g-2",
    )


def build_dashboard_panel(settings: AppSettings) -> html.Div:
    """
    Listing page: the view-state store lives inside this panel so it is
    created fresh each time the dashboard is mounted.
    """
    return html.Div(
        id=IDs.Control.LISTING_ROOT,
        children=[
            dcc.Store(id=IDs.Store.VIEW_STATE, storage_type="memory"),
            dbc.Card(
                [
                    _build_header(settings),
                    dbc.CardBody(
                        dcc.Loading(
                            [
                                html.Div(id=IDs.Control.LISTING_ERROR),
                                html.Div(
                                    id=IDs.Control.LISTING_CONTENT,
                                    style={"display": "none"},
                                    children=[
                                        _build_controls(),
                                        html.Div(
                                            id=IDs.Control.RECORD_GRID,
                                            className="pb-record-grid mt-3",
                                        ),
                                        html.Div(
                                            id=IDs.Control.PAGINATION_CONTAINER,
                                            style={"display": "none"},
                                            children=dbc.Pagination(
                                                id=IDs.Control.PAGINATION,
                                                max_value=1,
                                                active_page=1,
                                                previous_next=True,
                                                fully_expanded=True,
                                                className="justify-content-center mt-3",
                                            ),
                                        ),
                                    ],
                                ),
                            ]
                        )
                    ),
                ],
                className="pb-dashboard-card mx-4 mt-4",
            ),
        ],
    )
