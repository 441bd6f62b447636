from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from record_browser.core.columns import ColumnLayout
from record_browser.core.form_buffer import FormBufferManager, FormMode
from record_browser.core.record import Record
from record_browser.core.record_store import RecordStore

logger = logging.getLogger(__name__)


class ViewMode(str, Enum):
    CARDS = "cards"
    TABLE = "table"


class InteractionController:
    """
    Single owner of the browser's UI state.

    Translates user gestures (clicks, pointer drags, text input) into calls on
    the column layout, the record store and the form manager. Pointer sessions
    follow start -> track* -> end; stray track/end calls with no session are
    ignored and `pointer_cancel` ends whatever is in flight.
    """

    def __init__(
            self,
            store: RecordStore,
            columns: Optional[ColumnLayout] = None,
            forms: Optional[FormBufferManager] = None,
            view_mode: ViewMode = ViewMode.CARDS,
    ):
        self.store = store
        self.columns = columns or ColumnLayout()
        self.forms = forms or FormBufferManager()
        self.view_mode = ViewMode(view_mode)
        self.selected_id: Optional[int] = None
        self.dragged_key: Optional[str] = None

    # --- view / selection ---

    def toggle_view(self) -> ViewMode:
        self.view_mode = ViewMode.TABLE if self.view_mode is ViewMode.CARDS else ViewMode.CARDS
        return self.view_mode

    @property
    def selected(self) -> Optional[Record]:
        if self.selected_id is None:
            return None
        return self.store.get(self.selected_id)

    def select(self, record_id: int) -> None:
        self.selected_id = record_id if self.store.get(record_id) is not None else None

    def close_detail(self) -> None:
        self.selected_id = None

    # --- table header ---

    def search_input(self, text: Optional[str]) -> None:
        self.store.search(text)

    def header_click(self, key: str) -> None:
        column = self.columns.get(key)
        if column is None or not column.sortable:
            return
        self.store.sort_by(key)

    def sort_indicator(self, key: str) -> str:
        column = self.columns.get(key)
        if column is None or not column.sortable:
            return ""
        return self.store.sort_indicator(key)

    # --- resize gesture ---

    def resize_handle_down(self, key: str, pointer_x: float) -> None:
        self.columns.resize_start(key, pointer_x)

    def pointer_move(self, pointer_x: float) -> None:
        self.columns.resize_track(pointer_x)

    def pointer_up(self) -> None:
        self.columns.resize_end()

    # --- reorder gesture ---

    def drag_start(self, key: str) -> None:
        self.dragged_key = key if self.columns.get(key) is not None else None

    def drop_on(self, target_key: str) -> None:
        source = self.dragged_key
        self.dragged_key = None
        if source is None:
            return
        self.columns.drag_reorder(source, target_key)

    def drag_end(self) -> None:
        self.dragged_key = None

    def pointer_cancel(self) -> None:
        """Pointer lost (released outside the window, focus change, ...)."""
        if self.columns.resize_session is not None or self.dragged_key is not None:
            logger.debug("Cancelling pointer sessions")
        self.columns.resize_end()
        self.dragged_key = None

    # --- forms ---

    def open_create(self) -> None:
        self.forms.open_create()

    def open_edit(self, record_id: int) -> bool:
        record = self.store.get(record_id)
        if record is None:
            return False
        self.forms.open_edit(record)
        return True

    def submit_form(self) -> Record:
        mode = self.forms.mode
        record = self.forms.submit(self.store)
        if mode is FormMode.EDIT:
            self.close_detail()
        return record

    def delete(self, record_id: int, confirm: Callable[[Record], bool]) -> bool:
        """
        Delete after `confirm(record)` returns True. Returns False when the
        record is unknown or the user declined.
        """
        record = self.store.get(record_id)
        if record is None or not confirm(record):
            return False
        self.store.delete(record_id)
        if self.selected_id == record_id:
            self.close_detail()
        return True
