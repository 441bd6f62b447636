from __future__ import annotations

from typing import TYPE_CHECKING

import dash
from dash import Input, Output

from record_browser.core.interaction import ViewMode
from record_browser.ui.helpers import (
    card_grid,
    column_options,
    detail_body,
    status_text,
    table_column_styles,
    table_columns,
    table_rows,
)
from record_browser.ui.ids import IDs
from record_browser.ui.layout.build_navbar import toggle_view_label

if TYPE_CHECKING:
    from record_browser.ui.config import AppConfig

HIDDEN = {"display": "none"}


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.TABLE, "data"),
        Output(IDs.Control.TABLE, "columns"),
        Output(IDs.Control.TABLE, "style_cell_conditional"),
        Output(IDs.Control.TABLE_CONTAINER, "style"),
        Output(IDs.Control.CARDS_CONTAINER, "children"),
        Output(IDs.Control.CARDS_CONTAINER, "style"),
        Output(IDs.Control.TOGGLE_VIEW_BTN, "children"),
        Output(IDs.Control.STATUS_TEXT, "children"),
        Output(IDs.Control.LOAD_ERROR, "children"),
        Output(IDs.Control.LOAD_ERROR, "is_open"),
        Output(IDs.Control.NOTICE, "children"),
        Output(IDs.Control.NOTICE, "is_open"),
        Output(IDs.Control.DETAIL_MODAL, "is_open"),
        Output(IDs.Control.DETAIL_TITLE, "children"),
        Output(IDs.Control.DETAIL_BODY, "children"),
        Output(IDs.Control.MOVE_SOURCE, "options"),
        Output(IDs.Control.MOVE_TARGET, "options"),
        Input(IDs.Store.REVISION, "data"),
    )
    def render(_revision):
        controller = ctx.controller
        store = controller.store
        layout = controller.columns
        display = store.display

        is_table = controller.view_mode is ViewMode.TABLE
        selected = controller.selected
        options = column_options(layout)

        return (
            table_rows(display, layout),
            table_columns(layout),
            table_column_styles(layout),
            {} if is_table else HIDDEN,
            card_grid(display) if not is_table else None,
            HIDDEN if is_table else {},
            toggle_view_label(controller.view_mode),
            status_text(store, layout),
            store.error,
            bool(store.error),
            ctx.notice,
            bool(ctx.notice),
            selected is not None,
            selected.name if selected is not None else "",
            detail_body(selected),
            options,
            options,
        )
