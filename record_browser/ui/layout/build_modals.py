from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from record_browser.ui.ids import IDs


def build_detail_modal() -> html.Div:
    modal = dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle(id=IDs.Control.DETAIL_TITLE), close_button=False),
            dbc.ModalBody(id=IDs.Control.DETAIL_BODY),
            dbc.ModalFooter(
                [
                    dbc.Button("Delete", id=IDs.Control.DETAIL_DELETE_BTN, color="danger", outline=True),
                    dbc.Button("Edit", id=IDs.Control.DETAIL_EDIT_BTN, color="primary"),
                    dbc.Button("Close", id=IDs.Control.DETAIL_CLOSE_BTN, color="secondary"),
                ]
            ),
        ],
        id=IDs.Control.DETAIL_MODAL,
        is_open=False,
        size="lg",
    )
    return html.Div([modal, dcc.ConfirmDialog(id=IDs.Control.DELETE_CONFIRM)])


def _list_editor(label: str, input_id: str, add_id: str, list_id: str, placeholder: str) -> html.Div:
    return html.Div(
        [
            dbc.Label(label),
            dbc.InputGroup(
                [
                    dbc.Input(id=input_id, placeholder=placeholder, value=""),
                    dbc.Button("Add", id=add_id, color="secondary"),
                ],
                size="sm",
            ),
            html.Div(id=list_id, className="mt-1"),
        ],
        className="mb-3",
    )


def build_form_modal() -> dbc.Modal:
    """Create/edit form. Field values are pushed in when the form opens."""
    body = dbc.ModalBody(
        [
            dbc.Alert(id=IDs.Control.FORM_ALERT, color="danger", is_open=False, className="small"),
            html.Div(
                [dbc.Label("Name *"), dbc.Input(id=IDs.Control.FORM_NAME, value="")],
                className="mb-3",
            ),
            html.Div(
                [dbc.Label("Name origin"), dbc.Textarea(id=IDs.Control.FORM_EXPLANATION, value="")],
                className="mb-3",
            ),
            html.Div(
                [dbc.Label("Rating *"), dbc.Input(id=IDs.Control.FORM_RATING, type="number", value=0)],
                className="mb-3",
            ),
            html.Div(
                [dbc.Label("Picture URL"), dbc.Input(id=IDs.Control.FORM_IMAGE, value="")],
                className="mb-3",
            ),
            _list_editor(
                "Powers",
                IDs.Control.FORM_POWER_INPUT,
                IDs.Control.FORM_POWER_ADD,
                IDs.Control.FORM_POWER_LIST,
                "Add a power",
            ),
            _list_editor(
                "Catching tips",
                IDs.Control.FORM_TIP_INPUT,
                IDs.Control.FORM_TIP_ADD,
                IDs.Control.FORM_TIP_LIST,
                "Add a tip",
            ),
        ]
    )

    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle(id=IDs.Control.FORM_TITLE), close_button=False),
            body,
            dbc.ModalFooter(
                [
                    dbc.Button("Cancel", id=IDs.Control.FORM_CANCEL_BTN, color="secondary"),
                    dbc.Button("Save", id=IDs.Control.FORM_SUBMIT_BTN, color="primary"),
                ]
            ),
        ],
        id=IDs.Control.FORM_MODAL,
        is_open=False,
        backdrop="static",
        size="lg",
    )
