from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from record_browser.core.interaction import ViewMode
from record_browser.ui.ids import IDs


def toggle_view_label(mode: ViewMode) -> str:
    return "Table view" if mode is ViewMode.CARDS else "Card view"


def build_navbar(title: str, view_mode: ViewMode) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(
                            "Browse, search and edit the collection",
                            className="text-muted",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        dbc.Button(
                            toggle_view_label(view_mode),
                            id=IDs.Control.TOGGLE_VIEW_BTN,
                            color="secondary",
                            outline=True,
                            size="sm",
                            className="me-2",
                        ),
                        dbc.Button(
                            "Reload",
                            id=IDs.Control.RELOAD_BTN,
                            color="secondary",
                            outline=True,
                            size="sm",
                            className="me-2",
                        ),
                        dbc.Button(
                            "New record",
                            id=IDs.Control.NEW_RECORD_BTN,
                            color="primary",
                            size="sm",
                        ),
                    ],
                    className="ms-auto d-flex align-items-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm rb-navbar",
    )
