"""
Core state layer: records, column layout, filter/sort engine, record store,
form buffers and the interaction controller
"""

from .record import Record, RecordDraft
from .columns import ColumnDescriptor, ColumnLayout
from .view_engine import SortDirection, SortDirective
from .record_store import RecordStore
from .form_buffer import FormBuffer, FormBufferManager
from .interaction import InteractionController, ViewMode

__all__ = [
    "Record",
    "RecordDraft",
    "ColumnDescriptor",
    "ColumnLayout",
    "SortDirection",
    "SortDirective",
    "RecordStore",
    "FormBuffer",
    "FormBufferManager",
    "InteractionController",
    "ViewMode",
]
