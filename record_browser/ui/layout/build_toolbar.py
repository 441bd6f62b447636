from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from record_browser.core.columns import ColumnLayout
from record_browser.ui.helpers import column_options
from record_browser.ui.ids import IDs

MOVE_LABEL = "to the position of"


def build_toolbar(layout: ColumnLayout, search_term: str = "") -> dbc.Card:
    """
    Search box plus the column panel:
    - visibility checklist
    - "move column to the position of" controls (table reorder)
    """
    options = column_options(layout)

    search_row = dbc.Row(
        [
            dbc.Col(
                dbc.Input(
                    id=IDs.Control.SEARCH_INPUT,
                    type="search",
                    placeholder="Search name, origin, powers or tips",
                    value=search_term,
                    debounce=True,
                ),
                md=6,
            ),
            dbc.Col(
                html.Div(id=IDs.Control.STATUS_TEXT, className="text-muted small"),
                md=6,
                className="d-flex align-items-center justify-content-md-end",
            ),
        ],
        className="mb-2",
    )

    columns_row = dbc.Row(
        [
            dbc.Col(
                [
                    html.Label("Columns", className="form-label small mb-1"),
                    dbc.Checklist(
                        id=IDs.Control.COLUMN_VISIBILITY,
                        options=options,
                        value=[c.key for c in layout.visible_columns()],
                        inline=True,
                        className="small",
                    ),
                ],
                md=6,
            ),
            dbc.Col(
                [
                    html.Label("Move column", className="form-label small mb-1"),
                    html.Div(
                        [
                            dcc.Dropdown(
                                id=IDs.Control.MOVE_SOURCE,
                                options=options,
                                placeholder="Column",
                                clearable=False,
                                className="rb-move-dropdown me-2",
                            ),
                            html.Span(MOVE_LABEL, className="small me-2"),
                            dcc.Dropdown(
                                id=IDs.Control.MOVE_TARGET,
                                options=options,
                                placeholder="Column",
                                clearable=False,
                                className="rb-move-dropdown me-2",
                            ),
                            dbc.Button("Move", id=IDs.Control.MOVE_BTN, size="sm", color="secondary"),
                        ],
                        className="d-flex align-items-center",
                    ),
                ],
                md=6,
            ),
        ]
    )

    return dbc.Card(dbc.CardBody([search_row, columns_row]), className="mt-3")
