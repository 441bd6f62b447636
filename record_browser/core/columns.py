from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from .record import Record

logger = logging.getLogger(__name__)

MIN_COLUMN_WIDTH = 50


class ColumnKind(str, Enum):
    SCALAR = "scalar"
    STRING_SEQUENCE = "string_sequence"


@dataclass
class ColumnDescriptor:
    """
    Metadata for one table column.

    `kind` is resolved once when the descriptor table is built. Sequence
    columns are never sortable.
    """
    key: str
    label: str
    width: int
    visible: bool = True
    kind: ColumnKind = ColumnKind.SCALAR

    @property
    def sortable(self) -> bool:
        return self.kind is ColumnKind.SCALAR

    def format_cell(self, record: Record) -> str:
        value = getattr(record, self.key, None)
        if self.kind is ColumnKind.STRING_SEQUENCE:
            return ", ".join(value or [])
        if value is None:
            return ""
        return str(value)


def default_columns() -> List[ColumnDescriptor]:
    return [
        ColumnDescriptor("id", "ID", 80),
        ColumnDescriptor("name", "Name", 150),
        ColumnDescriptor("explanation", "Name Origin", 300),
        ColumnDescriptor("rating", "Rating", 120),
        ColumnDescriptor("powers", "Powers", 250, kind=ColumnKind.STRING_SEQUENCE),
        ColumnDescriptor("tips", "Catching Tips", 250, kind=ColumnKind.STRING_SEQUENCE),
    ]


SORTABLE_KEYS = frozenset(c.key for c in default_columns() if c.sortable)


def is_sortable(key: str) -> bool:
    return key in SORTABLE_KEYS


@dataclass
class ResizeSession:
    key: str
    start_x: float
    baseline_width: int


class ColumnLayout:
    """
    Ordered, mutable list of column descriptors.

    The set of descriptors is fixed at construction: the layout only reorders,
    resizes and toggles visibility. Any operation naming an unknown key is a
    no-op.
    """

    def __init__(self, columns: Optional[List[ColumnDescriptor]] = None):
        self._columns: List[ColumnDescriptor] = list(columns) if columns is not None else default_columns()
        self._resize: Optional[ResizeSession] = None

    def __iter__(self) -> Iterator[ColumnDescriptor]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    @property
    def columns(self) -> List[ColumnDescriptor]:
        return list(self._columns)

    @property
    def keys(self) -> List[str]:
        return [c.key for c in self._columns]

    @property
    def resize_session(self) -> Optional[ResizeSession]:
        return self._resize

    def get(self, key: str) -> Optional[ColumnDescriptor]:
        return next((c for c in self._columns if c.key == key), None)

    def visible_columns(self) -> List[ColumnDescriptor]:
        return [c for c in self._columns if c.visible]

    # ---------------------------------------------------------
    # Resize: start -> track* -> end, single active session
    # ---------------------------------------------------------
    def resize_start(self, key: str, pointer_x: float) -> None:
        column = self.get(key)
        if column is None:
            return
        if self._resize is not None:
            logger.debug(
                "Replacing unterminated resize session",
                extra={"column": self._resize.key},
            )
        self._resize = ResizeSession(key=key, start_x=pointer_x, baseline_width=column.width)

    def resize_track(self, pointer_x: float) -> None:
        session = self._resize
        if session is None:
            return
        column = self.get(session.key)
        if column is None:
            return
        delta = pointer_x - session.start_x
        column.width = max(MIN_COLUMN_WIDTH, int(round(session.baseline_width + delta)))

    def resize_end(self) -> None:
        self._resize = None

    @contextmanager
    def resizing(self, key: str, pointer_x: float) -> Iterator["ColumnLayout"]:
        """Run a resize session that is always ended, even if tracking raises."""
        self.resize_start(key, pointer_x)
        try:
            yield self
        finally:
            self.resize_end()

    # ---------------------------------------------------------
    # Reorder / visibility
    # ---------------------------------------------------------
    def drag_reorder(self, source_key: str, target_key: str) -> None:
        if source_key == target_key:
            return
        keys = self.keys
        if source_key not in keys or target_key not in keys:
            return

        source_idx = keys.index(source_key)
        target_idx = keys.index(target_key)

        moved = self._columns.pop(source_idx)
        self._columns.insert(target_idx, moved)

    def toggle_visible(self, key: str) -> None:
        column = self.get(key)
        if column is not None:
            column.visible = not column.visible

    def snapshot(self) -> List[Dict[str, Any]]:
        rows = []
        for column in self._columns:
            row = asdict(column)
            row["kind"] = column.kind.value
            row["sortable"] = column.sortable
            rows.append(row)
        return rows
