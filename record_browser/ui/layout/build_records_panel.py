from __future__ import annotations

from dash import dash_table, html

from record_browser.ui.helpers import table_style
from record_browser.ui.ids import IDs


def build_records_panel() -> html.Div:
    """
    Both presentations of the display sequence. Visibility of each container
    and all table data are filled in by the render callback.
    """
    table = dash_table.DataTable(
        id=IDs.Control.TABLE,
        data=[],
        columns=[],
        sort_action="custom",
        sort_mode="single",
        sort_by=[],
        style_as_list_view=True,
        **table_style(),
    )

    return html.Div(
        [
            html.Div(table, id=IDs.Control.TABLE_CONTAINER, className="mt-3"),
            html.Div(id=IDs.Control.CARDS_CONTAINER, className="mt-3"),
        ]
    )
