from __future__ import annotations

from typing import List, Sequence

import dash_bootstrap_components as dbc
from dash import html

from post_browser.core.list_view_state import PageSummary
from post_browser.core.record import FilterField, Record


def filter_field_options() -> List[dict]:
    return [
        {"label": "Title", "value": FilterField.TITLE.value},
        {"label": "ID", "value": FilterField.ID.value},
    ]


def format_summary(summary: PageSummary) -> str:
    return (
        f"Showing {summary.first_index}-{summary.last_index} "
        f"of {summary.total_filtered} posts"
    )


def build_record_card(record: Record) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                [
                    html.Div(str(record.id), className="pb-record-id"),
                    html.P(record.title, className="pb-record-title mb-0"),
                ]
            ),
            dbc.CardBody(html.P(record.body, className="pb-record-body")),
        ],
        className="pb-record-card mb-2",
    )


def build_record_grid(records: Sequence[Record]) -> list:
    if not records:
        return [
            dbc.Card(
                dbc.CardBody("No Data found", className="pb-empty-text"),
                className="pb-empty-card",
            )
        ]
    return [html.Div(build_record_card(r), key=str(r.id)) for r in records]


def build_error_alert(message: str) -> dbc.Alert:
    return dbc.Alert(
        [
            html.H5("Error", className="alert-heading"),
            html.P(message, className="mb-0"),
        ],
        color="danger",
    )


def style(flag: bool) -> dict:
    return {} if flag else {"display": "none"}
