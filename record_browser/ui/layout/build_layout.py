from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from record_browser.ui.ids import IDs
from record_browser.ui.layout.build_modals import build_detail_modal, build_form_modal
from record_browser.ui.layout.build_navbar import build_navbar
from record_browser.ui.layout.build_records_panel import build_records_panel
from record_browser.ui.layout.build_toolbar import build_toolbar

if TYPE_CHECKING:
    from record_browser.ui.config import AppConfig


def build_layout(ctx: "AppConfig"):
    controller = ctx.controller

    return dbc.Container(
        fluid=True,
        className="rb-root",
        children=[
            build_navbar(ctx.settings.ui_title, controller.view_mode),

            # Bumped by every state-changing callback; drives the render callback
            dcc.Store(id=IDs.Store.REVISION, data=0),

            dbc.Alert(id=IDs.Control.LOAD_ERROR, color="danger", is_open=False, className="mt-3"),
            dbc.Alert(
                id=IDs.Control.NOTICE,
                color="warning",
                is_open=False,
                dismissable=True,
                className="mt-3",
            ),

            build_toolbar(controller.columns, ctx.store.search_term),
            build_records_panel(),
            build_detail_modal(),
            build_form_modal(),
        ],
    )
