from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output, State
from dash.exceptions import PreventUpdate

from post_browser.core.list_view_state import ListViewState
from post_browser.core.record import FilterField
from post_browser.services.listing_service import ListingService, LoadResult
from post_browser.ui.helpers import build_error_alert, build_record_grid, format_summary, style
from post_browser.ui.ids import IDs

if TYPE_CHECKING:
    from post_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

_MOUNT_TRIGGERS = (None, IDs.Control.LISTING_ROOT)

# Store value once a load has failed; holds the message, never records
ERROR_KEY = "error"


def apply_listing_event(
        service: ListingService,
        trigger: Optional[str],
        state_data: Optional[dict[str, Any]],
        search_term: Optional[str],
        filter_value: Optional[str],
        active_page: Optional[int],
) -> LoadResult:
    """
    Apply one UI event to the stored view state.

    An empty store means the listing was just mounted: perform the single load
    for this view, then apply whatever query the controls already hold. A
    stored error is terminal and every later event is ignored.
    """
    if state_data is None:
        result = service.open_view()
        if result.ok:
            result.state.set_filter_field(filter_value or FilterField.TITLE.value)
            result.state.set_search_term(search_term or "")
        return result

    if ERROR_KEY in state_data:
        raise PreventUpdate

    state = ListViewState.from_dict(state_data)

    if trigger in _MOUNT_TRIGGERS:
        return LoadResult(state=state)

    if trigger == IDs.Control.SEARCH_INPUT:
        state.set_search_term(search_term or "")
    elif trigger == IDs.Control.FILTER_SELECT:
        state.set_filter_field(filter_value or FilterField.TITLE.value)
    elif trigger == IDs.Control.PAGINATION:
        state.set_page(active_page or 1)
    else:
        raise PreventUpdate

    return LoadResult(state=state)


def render_listing(result: LoadResult) -> tuple:
    """Map a LoadResult onto the listing outputs, in callback output order."""
    if not result.ok:
        message = result.error or "An unknown error occurred"
        return (
            {ERROR_KEY: message},
            build_error_alert(message),
            style(False),
            "",
            [],
            1,
            1,
            style(False),
        )

    state = result.state
    return (
        state.to_dict(),
        None,
        style(True),
        format_summary(state.summary()),
        build_record_grid(state.visible_page()),
        state.total_pages,
        state.current_page,
        style(state.total_pages > 1),
    )


def register_listing_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Mount load + search / filter / page changes -> view state + page
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Output(IDs.Control.LISTING_ERROR, "children"),
        Output(IDs.Control.LISTING_CONTENT, "style"),
        Output(IDs.Control.SUMMARY_TEXT, "children"),
        Output(IDs.Control.RECORD_GRID, "children"),
        Output(IDs.Control.PAGINATION, "max_value"),
        Output(IDs.Control.PAGINATION, "active_page"),
        Output(IDs.Control.PAGINATION_CONTAINER, "style"),
        Input(IDs.Control.LISTING_ROOT, "id"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.FILTER_SELECT, "value"),
        Input(IDs.Control.PAGINATION, "active_page"),
        State(IDs.Store.VIEW_STATE, "data"),
    )
    def update_listing(_root_id, search_term, filter_value, active_page, state_data):
        trigger = dash.ctx.triggered_id

        try:
            result = apply_listing_event(
                ctx.listing_service,
                trigger,
                state_data,
                search_term,
                filter_value,
                active_page,
            )
        except PreventUpdate:
            raise
        except Exception:
            logger.exception("Failed to apply listing event", extra={"trigger": trigger})
            result = LoadResult(error="Internal error: invalid view state.")

        if result.ok:
            summary = result.state.summary()
            logger.debug(
                "listing_updated",
                extra={
                    "trigger": trigger,
                    "current_page": result.state.current_page,
                    "total_filtered": summary.total_filtered,
                },
            )

        return render_listing(result)
