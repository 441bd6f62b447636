from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from record_browser.core.record import Record, RecordDraft

if TYPE_CHECKING:
    from record_browser.core.record_store import RecordStore

logger = logging.getLogger(__name__)

LIST_FIELDS = ("powers", "tips")
SCALAR_FIELDS = ("name", "explanation", "rating", "image_ref")


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclass
class FormBuffer:
    """
    Draft state of one create/edit modal session.

    - draft: the partial record being edited (a deep copy in edit mode)
    - pending_power / pending_tip: scratch text for the next list entry
    """
    mode: FormMode
    draft: RecordDraft = field(default_factory=RecordDraft)
    pending_power: str = ""
    pending_tip: str = ""

    def pending(self, list_field: str) -> str:
        return self.pending_power if list_field == "powers" else self.pending_tip

    def set_pending(self, list_field: str, text: str) -> None:
        if list_field == "powers":
            self.pending_power = text
        else:
            self.pending_tip = text


def _check_list_field(list_field: str) -> None:
    if list_field not in LIST_FIELDS:
        raise ValueError(f"Unknown list field '{list_field}', expected one of {LIST_FIELDS}")


class FormBufferManager:
    """
    Holds at most one open FormBuffer. Nothing here touches the record store
    until `submit`.
    """

    def __init__(self) -> None:
        self.buffer: Optional[FormBuffer] = None

    @property
    def is_open(self) -> bool:
        return self.buffer is not None

    @property
    def mode(self) -> Optional[FormMode]:
        return self.buffer.mode if self.buffer is not None else None

    def open_create(self) -> FormBuffer:
        self.buffer = FormBuffer(mode=FormMode.CREATE)
        return self.buffer

    def open_edit(self, record: Record) -> FormBuffer:
        self.buffer = FormBuffer(mode=FormMode.EDIT, draft=record.to_draft())
        return self.buffer

    def close(self) -> None:
        self.buffer = None

    def set_field(self, name: str, value: Any) -> None:
        if name not in SCALAR_FIELDS:
            raise ValueError(f"Unknown form field '{name}'")
        if self.buffer is None:
            return
        setattr(self.buffer.draft, name, value)

    def set_pending(self, list_field: str, text: str) -> None:
        _check_list_field(list_field)
        if self.buffer is not None:
            self.buffer.set_pending(list_field, text or "")

    def add_list_item(self, list_field: str, text: Optional[str] = None) -> bool:
        """
        Append trimmed `text` (default: the pending scratch text) to powers or
        tips and clear the scratch field. Blank text is ignored.
        """
        _check_list_field(list_field)
        if self.buffer is None:
            return False

        value = (self.buffer.pending(list_field) if text is None else text).strip()
        if not value:
            return False

        getattr(self.buffer.draft, list_field).append(value)
        self.buffer.set_pending(list_field, "")
        return True

    def remove_list_item(self, list_field: str, index: int) -> bool:
        _check_list_field(list_field)
        if self.buffer is None:
            return False

        items = getattr(self.buffer.draft, list_field)
        if not 0 <= index < len(items):
            return False
        del items[index]
        return True

    def submit(self, store: RecordStore) -> Record:
        """
        Hand the draft to the store. The buffer is discarded only on success;
        ValidationError and TransportError propagate with the buffer intact.
        """
        if self.buffer is None:
            raise RuntimeError("No form is open")

        buffer = self.buffer
        if buffer.mode is FormMode.CREATE:
            record = store.create(buffer.draft)
        else:
            if buffer.draft.id is None:
                raise RuntimeError("Edit form has no record id")
            record = store.update(buffer.draft.id, buffer.draft)

        logger.debug("Form submitted", extra={"mode": buffer.mode.value, "record_id": record.id})
        self.close()
        return record
