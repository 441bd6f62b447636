from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import dash_bootstrap_components as dbc
from dash import html

from record_browser.core.columns import ColumnLayout
from record_browser.core.record import Record
from record_browser.core.record_store import RecordStore
from record_browser.ui.ids import form_remove_id, record_card_id

_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif'


def table_columns(layout: ColumnLayout) -> List[Dict[str, Any]]:
    """DataTable column specs for the visible columns, in layout order."""
    return [
        {"name": c.label, "id": c.key}
        for c in layout.visible_columns()
    ]


def table_rows(records: Sequence[Record], layout: ColumnLayout) -> List[Dict[str, Any]]:
    """
    One dict per record with every column formatted, plus the raw id so
    DataTable can report `row_id` for clicks even when the ID column is hidden.
    """
    rows = []
    for record in records:
        row: Dict[str, Any] = {c.key: c.format_cell(record) for c in layout}
        row["id"] = record.id
        rows.append(row)
    return rows


def table_column_styles(layout: ColumnLayout) -> List[Dict[str, Any]]:
    styles = []
    for c in layout.visible_columns():
        width = f"{c.width}px"
        styles.append(
            {"if": {"column_id": c.key}, "width": width, "minWidth": width, "maxWidth": width}
        )
    return styles


def table_sort_by(store: RecordStore) -> List[Dict[str, str]]:
    if store.sort is None:
        return []
    return [{"column_id": store.sort.key, "direction": store.sort.direction.value}]


def table_style() -> Dict[str, Dict[str, Any]]:
    return {
        "style_table": {"overflowX": "auto"},
        "style_cell": {
            "fontFamily": _FONT,
            "fontSize": "13px",
            "padding": "6px 8px",
            "textAlign": "left",
            "whiteSpace": "normal",
            "height": "auto",
        },
        "style_header": {
            "fontFamily": _FONT,
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
    }


def status_text(store: RecordStore, layout: ColumnLayout) -> str:
    shown = len(store.display)
    total = len(store.records)
    text = f"{shown} of {total} records"
    if store.sort is not None:
        column = layout.get(store.sort.key)
        label = column.label if column is not None else store.sort.key
        text += f" · sorted by {label} {store.sort_indicator(store.sort.key)}"
    return text


def column_options(layout: ColumnLayout) -> List[Dict[str, str]]:
    return [{"label": c.label, "value": c.key} for c in layout]


def record_card(record: Record) -> html.Div:
    tier = record.tier
    return html.Div(
        dbc.Card(
            [
                html.Div(
                    [
                        html.Span(f"#{record.id}", className="rb-card-id"),
                        html.Span(tier.label, className="rb-card-tier"),
                    ],
                    className="rb-card-header d-flex justify-content-between",
                    style={"backgroundColor": tier.color},
                ),
                dbc.CardImg(src=record.image_ref, top=False) if record.image_ref else None,
                dbc.CardBody(
                    [
                        html.H5(record.name, className="card-title mb-1"),
                        html.Small(f"Rating {record.rating}", className="text-muted"),
                        html.P(record.explanation, className="small mt-2 mb-0"),
                    ]
                ),
            ],
            className="rb-card h-100 shadow-sm",
        ),
        id=record_card_id(record.id),
        n_clicks=0,
        className="rb-card-wrapper",
    )


def card_grid(records: Sequence[Record]) -> Any:
    if not records:
        return html.Div("No records to show.", className="text-muted p-3")
    return dbc.Row(
        [dbc.Col(record_card(r), xs=12, sm=6, md=4, lg=3, className="mb-3") for r in records],
        className="g-3",
    )


def _bullet_list(title: str, items: Sequence[str]) -> html.Div:
    return html.Div(
        [
            html.Strong(title),
            html.Ul([html.Li(i) for i in items]) if items else html.Div("None", className="text-muted small"),
        ],
        className="mb-2",
    )


def detail_body(record: Optional[Record]) -> Any:
    if record is None:
        return None
    tier = record.tier
    return html.Div(
        [
            html.Img(src=record.image_ref, className="rb-detail-img mb-2") if record.image_ref else None,
            html.Div(
                [html.Strong("Rating: "), f"{record.rating} ", dbc.Badge(tier.label, style={"backgroundColor": tier.color})],
                className="mb-2",
            ),
            html.Div([html.Strong("Name Origin: "), record.explanation or "-"], className="mb-2"),
            _bullet_list("Powers", record.powers),
            _bullet_list("Catching Tips", record.tips),
        ]
    )


def form_item_list(list_field: str, items: Sequence[str]) -> Any:
    """Editable list of draft items, each with a remove button."""
    if not items:
        return html.Div("Nothing added yet.", className="text-muted small")
    return dbc.ListGroup(
        [
            dbc.ListGroupItem(
                [
                    html.Span(item),
                    dbc.Button(
                        "×",
                        id=form_remove_id(list_field, i),
                        n_clicks=0,
                        color="link",
                        size="sm",
                        className="p-0 ms-2",
                    ),
                ],
                className="d-flex justify-content-between align-items-center py-1",
            )
            for i, item in enumerate(items)
        ],
        flush=True,
    )
