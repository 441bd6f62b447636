from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from record_browser.config.loader import load_settings
from record_browser.core.interaction import InteractionController, ViewMode
from record_browser.core.record_store import RecordStore
from record_browser.services.gateway import BackendGateway, HttpBackendGateway
from record_browser.ui.layout.build_layout import build_layout
from record_browser.ui.callbacks.callbacks_render import register_render_callbacks
from record_browser.ui.callbacks.callbacks_records import register_record_callbacks
from record_browser.ui.callbacks.callbacks_form import register_form_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
        config_root: Path | str = Path("config"),
        gateway: Optional[BackendGateway] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    settings = load_settings(config_root)

    # 2) Initialize Service Layer
    if gateway is None:
        gateway = HttpBackendGateway(
            settings.backend_url,
            settings.records_path,
            timeout=settings.request_timeout_seconds,
        )

    # 3) Core state, loaded once up front; a failed load leaves the error flag set
    store = RecordStore(gateway)
    store.load()
    controller = InteractionController(store, view_mode=ViewMode(settings.default_view_mode))

    # 4) App Context
    ctx = AppConfig(settings=settings, controller=controller)

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = settings.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_render_callbacks(app, ctx)
    register_record_callbacks(app, ctx)
    register_form_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"backend_url": settings.backend_url, "n_records": len(store.records)},
    )
    return app
