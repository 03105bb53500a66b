from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from post_browser.config.loader import load_app_config
from post_browser.config.model import AppSettings
from post_browser.services.auth_service import AuthService
from post_browser.services.data_source import HttpRecordSource, JsonFileRecordSource, RecordSource
from post_browser.services.listing_service import ListingService
from post_browser.ui.layout.build_layout import build_layout
from post_browser.ui.callbacks.callbacks_auth import register_auth_callbacks
from post_browser.ui.callbacks.callbacks_listing import register_listing_callbacks
from post_browser.ui.callbacks.callbacks_routing import register_routing_callbacks

logger = logging.getLogger(__name__)


def _build_source(settings: AppSettings) -> RecordSource:
    if settings.source_file is not None:
        return JsonFileRecordSource(settings.source_file)
    return HttpRecordSource(settings.source_url, timeout=settings.request_timeout)


def create_dash_app(
        config_root: Path | str = Path("config"),
        source: Optional[RecordSource] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    settings = load_app_config(config_root)

    # 2) Initialize Service Layer
    if source is None:
        source = _build_source(settings)

    ctx = AppConfig(
        config_root=config_root,
        settings=settings,
        listing_service=ListingService(source, page_size=settings.page_size),
        auth_service=AuthService(login_delay=settings.login_delay),
    )
    ctx.validate()

    logger.info(
        "Creating Dash app",
        extra={"config_root": str(config_root), "source": source.description},
    )

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
        # Page components are rendered by the routing callback
        suppress_callback_exceptions=True,
    )

    app.title = settings.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_routing_callbacks(app, ctx)
    register_auth_callbacks(app, ctx)
    register_listing_callbacks(app, ctx)

    return app
