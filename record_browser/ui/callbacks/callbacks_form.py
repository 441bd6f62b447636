from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State, exceptions

from record_browser.core.exceptions import TransportError
from record_browser.core.form_buffer import FormMode
from record_browser.ui.helpers import form_item_list
from record_browser.ui.ids import IDs
from record_browser.validation.errors import ValidationError

if TYPE_CHECKING:
    from record_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

TITLES = {
    FormMode.CREATE: "New record",
    FormMode.EDIT: "Edit record",
}


def register_form_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    controller = ctx.controller
    forms = controller.forms

    def _closed(revision, bump: bool):
        # 13 outputs: modal, title, 6 inputs, 2 lists, alert x2, revision
        return (
            False, dash.no_update,
            dash.no_update, dash.no_update, dash.no_update, dash.no_update,
            dash.no_update, dash.no_update,
            dash.no_update, dash.no_update,
            "", False,
            (revision or 0) + 1 if bump else dash.no_update,
        )

    def _opened(alert: str = "", reset_inputs: bool = False):
        buffer = forms.buffer
        draft = buffer.draft
        if reset_inputs:
            fields = (draft.name, draft.explanation, draft.rating, draft.image_ref)
        else:
            fields = (dash.no_update,) * 4
        return (
            True,
            TITLES[buffer.mode],
            *fields,
            buffer.pending_power,
            buffer.pending_tip,
            form_item_list("powers", draft.powers),
            form_item_list("tips", draft.tips),
            alert,
            bool(alert),
            dash.no_update,
        )

    @app.callback(
        Output(IDs.Control.FORM_MODAL, "is_open"),
        Output(IDs.Control.FORM_TITLE, "children"),
        Output(IDs.Control.FORM_NAME, "value"),
        Output(IDs.Control.FORM_EXPLANATION, "value"),
        Output(IDs.Control.FORM_RATING, "value"),
        Output(IDs.Control.FORM_IMAGE, "value"),
        Output(IDs.Control.FORM_POWER_INPUT, "value"),
        Output(IDs.Control.FORM_TIP_INPUT, "value"),
        Output(IDs.Control.FORM_POWER_LIST, "children"),
        Output(IDs.Control.FORM_TIP_LIST, "children"),
        Output(IDs.Control.FORM_ALERT, "children"),
        Output(IDs.Control.FORM_ALERT, "is_open"),
        Output(IDs.Store.REVISION, "data", allow_duplicate=True),
        Input(IDs.Control.NEW_RECORD_BTN, "n_clicks"),
        Input(IDs.Control.DETAIL_EDIT_BTN, "n_clicks"),
        Input(IDs.Control.FORM_CANCEL_BTN, "n_clicks"),
        Input(IDs.Control.FORM_SUBMIT_BTN, "n_clicks"),
        Input(IDs.Control.FORM_POWER_ADD, "n_clicks"),
        Input(IDs.Control.FORM_TIP_ADD, "n_clicks"),
        Input({"type": IDs.Pattern.FORM_REMOVE, "field": ALL, "index": ALL}, "n_clicks"),
        State(IDs.Control.FORM_NAME, "value"),
        State(IDs.Control.FORM_EXPLANATION, "value"),
        State(IDs.Control.FORM_RATING, "value"),
        State(IDs.Control.FORM_IMAGE, "value"),
        State(IDs.Control.FORM_POWER_INPUT, "value"),
        State(IDs.Control.FORM_TIP_INPUT, "value"),
        State(IDs.Store.REVISION, "data"),
        prevent_initial_call=True,
    )
    def handle_form(
            _new, _edit, _cancel, _submit, _add_power, _add_tip, _remove,
            name, explanation, rating, image_ref, pending_power, pending_tip,
            revision,
    ):
        triggered_id = dash.ctx.triggered_id
        triggered = dash.ctx.triggered
        if triggered_id is None or not triggered or not triggered[0].get("value"):
            raise exceptions.PreventUpdate

        if triggered_id == IDs.Control.NEW_RECORD_BTN:
            controller.open_create()
            return _opened(reset_inputs=True)

        if triggered_id == IDs.Control.DETAIL_EDIT_BTN:
            if controller.selected_id is None or not controller.open_edit(controller.selected_id):
                raise exceptions.PreventUpdate
            return _opened(reset_inputs=True)

        if triggered_id == IDs.Control.FORM_CANCEL_BTN:
            forms.close()
            return _closed(revision, bump=False)

        if not forms.is_open:
            raise exceptions.PreventUpdate

        # Capture what the user typed so far before acting on the buffer
        forms.set_field("name", name or "")
        forms.set_field("explanation", explanation or "")
        forms.set_field("rating", rating)
        forms.set_field("image_ref", image_ref or "")
        forms.set_pending("powers", pending_power or "")
        forms.set_pending("tips", pending_tip or "")

        if triggered_id == IDs.Control.FORM_POWER_ADD:
            forms.add_list_item("powers")
            return _opened()

        if triggered_id == IDs.Control.FORM_TIP_ADD:
            forms.add_list_item("tips")
            return _opened()

        if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.FORM_REMOVE:
            forms.remove_list_item(triggered_id["field"], int(triggered_id["index"]))
            return _opened()

        if triggered_id == IDs.Control.FORM_SUBMIT_BTN:
            try:
                controller.submit_form()
            except ValidationError as e:
                logger.debug("Form rejected", extra={"codes": e.codes})
                return _opened(alert=" ".join(i.message + "." for i in e.issues))
            except TransportError:
                action = "create" if forms.mode is FormMode.CREATE else "update"
                return _opened(alert=f"Failed to {action} record. Please try again.")
            ctx.notice = ""
            return _closed(revision, bump=True)

        raise exceptions.PreventUpdate
