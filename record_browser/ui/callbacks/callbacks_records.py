from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State, exceptions

from record_browser.core.exceptions import TransportError
from record_browser.ui.helpers import table_sort_by
from record_browser.ui.ids import IDs

if TYPE_CHECKING:
    from record_browser.core.interaction import InteractionController
    from record_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

REVISION = Output(IDs.Store.REVISION, "data", allow_duplicate=True)


def _bump(revision) -> int:
    return (revision or 0) + 1


def select_table_cell(controller: InteractionController, active_cell) -> bool:
    """Select the record behind a clicked table cell, if there is one."""
    if not active_cell or active_cell.get("row_id") is None:
        return False
    controller.select(active_cell["row_id"])
    return True


def register_record_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    controller = ctx.controller

    # ---------------------------------------------------------
    # Navbar actions
    # ---------------------------------------------------------
    @app.callback(
        REVISION,
        Input(IDs.Control.RELOAD_BTN, "n_clicks"),
        State(IDs.Store.REVISION, "data"),
        prevent_initial_call=True,
    )
    def reload_records(_n, revision):
        ctx.notice = ""
        controller.store.load()
        return _bump(revision)

    @app.callback(
        REVISION,
        Input(IDs.Control.TOGGLE_VIEW_BTN, "n_clicks"),
        State(IDs.Store.REVISION, "data"),
        prevent_initial_call=True,
    )
    def toggle_view(_n, revision):
        controller.toggle_view()
        return _bump(revision)

    # ---------------------------------------------------------
    # Search + sort
    # ---------------------------------------------------------
    @app.callback(
        REVISION,
        Input(IDs.Control.SEARCH_INPUT, "value"),
        State(IDs.Store.REVISION, "data"),
        prevent_initial_call=True,
    )
    def search(term, revision):
        controller.search_input(term)
        return _bump(revision)

    @app.callback(
        Output(IDs.Control.TABLE, "sort_by"),
        REVISION,
        Input(IDs.Control.TABLE, "sort_by"),
        State(IDs.Store.REVISION, "data"),
        prevent_initial_call=True,
    )
    def sort_table(sort_by, revision):
        # DataTable cycles asc -> desc -> none on repeated clicks; "none"
        # means the active column was clicked again.
        if sort_by:
            key = sort_by[0].get("column_id")
        elif controller.store.sort is not None:
            key = controller.store.sort.key
        else:
            raise exceptions.PreventUpdate

        controller.header_click(key)
        return table_sort_by(controller.store), _bump(revision)

    # ---------------------------------------------------------
    # Column layout
    # ---------------------------------------------------------
    @app.callback(
        REVISION,
        Input(IDs.Control.COLUMN_VISIBILITY, "value"),
        State(IDs.Store.REVISION, "data"),
        prevent_initial_call=True,
    )
    def update_visibility(visible_keys, revision):
        wanted = set(visible_keys or [])
        for column in controller.columns:
            if column.visible != (column.key in wanted):
                controller.columns.toggle_visible(column.key)
        return _bump(revision)

    @app.callback(
        REVISION,
        Input(IDs.Control.MOVE_BTN, "n_clicks"),
        State(IDs.Control.MOVE_SOURCE, "value"),
        State(IDs.Control.MOVE_TARGET, "value"),
        State(IDs.Store.REVISION, "data"),
        prevent_initial_call=True,
    )
    def move_column(_n, source, target, revision):
        if not source or not target:
            raise exceptions.PreventUpdate
        controller.drag_start(source)
        controller.drop_on(target)
        return _bump(revision)

    # ---------------------------------------------------------
    # Selection + detail
    # ---------------------------------------------------------
    @app.callback(
        REVISION,
        Input({"type": IDs.Pattern.RECORD_CARD, "index": ALL}, "n_clicks"),
        State(IDs.Store.REVISION, "data"),
        prevent_initial_call=True,
    )
    def select_card(_clicks, revision):
        triggered = dash.ctx.triggered
        # Re-rendered cards arrive with n_clicks=0; only real clicks count
        if not triggered or not triggered[0].get("value"):
            raise exceptions.PreventUpdate
        controller.select(dash.ctx.triggered_id["index"])
        return _bump(revision)

    @app.callback(
        Output(IDs.Control.TABLE, "active_cell"),
        REVISION,
        Input(IDs.Control.TABLE, "active_cell"),
        State(IDs.Store.REVISION, "data"),
        prevent_initial_call=True,
    )
    def select_row(active_cell, revision):
        if not select_table_cell(controller, active_cell):
            raise exceptions.PreventUpdate
        # Clear the cell so clicking it again fires a new change
        return None, _bump(revision)

    @app.callback(
        REVISION,
        Input(IDs.Control.DETAIL_CLOSE_BTN, "n_clicks"),
        State(IDs.Store.REVISION, "data"),
        prevent_initial_call=True,
    )
    def close_detail(_n, revision):
        controller.close_detail()
        return _bump(revision)

    # ---------------------------------------------------------
    # Delete (confirmed through a dialog)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DELETE_CONFIRM, "displayed"),
        Output(IDs.Control.DELETE_CONFIRM, "message"),
        Input(IDs.Control.DETAIL_DELETE_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def ask_delete(_n):
        record = controller.selected
        if record is None:
            raise exceptions.PreventUpdate
        return True, f"Are you sure you want to delete {record.name}? This action cannot be undone."

    @app.callback(
        REVISION,
        Input(IDs.Control.DELETE_CONFIRM, "submit_n_clicks"),
        State(IDs.Store.REVISION, "data"),
        prevent_initial_call=True,
    )
    def confirm_delete(_n, revision):
        record = controller.selected
        if record is None:
            raise exceptions.PreventUpdate

        ctx.notice = ""
        try:
            # The dialog already asked the user
            controller.delete(record.id, confirm=lambda _record: True)
        except TransportError:
            logger.warning("Delete failed", extra={"record_id": record.id})
            ctx.notice = f"Failed to delete {record.name}. Please try again."
        return _bump(revision)
