from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from record_browser.core.columns import is_sortable
from record_browser.core.exceptions import TransportError
from record_browser.core.record import Record, RecordDraft
from record_browser.core.view_engine import SortDirection, SortDirective, derive_display
from record_browser.validation.errors import ValidationError
from record_browser.validation.record_validation import validate_candidate

if TYPE_CHECKING:
    from record_browser.services.gateway import BackendGateway

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load records from backend"


class RecordStore:
    """
    Owns the canonical record sequence and the derived display sequence.

    Every mutation round-trips through the gateway before local state
    changes; on failure the canonical sequence is left as it was. The display
    sequence is rebuilt from scratch after every relevant input.
    """

    def __init__(self, gateway: BackendGateway):
        self.gateway = gateway
        self._records: List[Record] = []
        self._display: List[Record] = []
        self.search_term: str = ""
        self.sort: Optional[SortDirective] = None
        self.loading: bool = False
        self.error: str = ""

    @property
    def records(self) -> List[Record]:
        return list(self._records)

    @property
    def display(self) -> List[Record]:
        return list(self._display)

    def get(self, record_id: int) -> Optional[Record]:
        return next((r for r in self._records if r.id == record_id), None)

    def _recompute(self) -> None:
        self._display = derive_display(self._records, self.search_term, self.sort)

    # ---------------------------------------------------------
    # Backend round-trips
    # ---------------------------------------------------------
    def load(self) -> bool:
        """
        Fetch the full collection. On failure the error flag is set and the
        previously loaded records stay in place.
        """
        self.loading = True
        self.error = ""
        try:
            records = self.gateway.list_records()
        except TransportError:
            logger.exception("Error loading records")
            self.error = LOAD_ERROR_MESSAGE
            return False
        finally:
            self.loading = False

        self._records = list(records)
        self._recompute()
        logger.info("Records loaded", extra={"n_records": len(self._records)})
        return True

    def _validate(self, candidate: RecordDraft, action: str) -> RecordDraft:
        try:
            return validate_candidate(candidate)
        except ValidationError as e:
            logger.warning(
                "Rejected %s: %s", action, "; ".join(e.codes),
                extra={"codes": e.codes},
            )
            raise

    def create(self, candidate: RecordDraft) -> Record:
        draft = self._validate(candidate, "create")
        try:
            created = self.gateway.create_record(draft)
        except TransportError:
            logger.exception("Error creating record", extra={"record_name": draft.name})
            raise

        self._records.append(created)
        self._recompute()
        logger.info("Record created", extra={"record_id": created.id})
        return created

    def update(self, record_id: int, candidate: RecordDraft) -> Record:
        """
        Replace the record with `record_id` in place. When no local record
        matches, the backend result is accepted and nothing is replaced.
        """
        draft = self._validate(candidate, "update")
        try:
            updated = self.gateway.update_record(record_id, draft)
        except TransportError:
            logger.exception("Error updating record", extra={"record_id": record_id})
            raise

        index = next((i for i, r in enumerate(self._records) if r.id == record_id), None)
        if index is None:
            logger.info("Updated record not present locally", extra={"record_id": record_id})
        else:
            self._records[index] = updated
            self._recompute()
        return updated

    def delete(self, record_id: int) -> None:
        """Caller is responsible for confirming with the user first."""
        try:
            self.gateway.delete_record(record_id)
        except TransportError:
            logger.exception("Error deleting record", extra={"record_id": record_id})
            raise

        self._records = [r for r in self._records if r.id != record_id]
        self._recompute()
        logger.info("Record deleted", extra={"record_id": record_id})

    # ---------------------------------------------------------
    # Local view state
    # ---------------------------------------------------------
    def search(self, term: Optional[str]) -> None:
        self.search_term = term or ""
        self._recompute()

    def sort_by(self, key: str) -> None:
        if not is_sortable(key):
            return

        if self.sort is not None and self.sort.key == key:
            self.sort = SortDirective(key, self.sort.direction.toggled())
        else:
            self.sort = SortDirective(key, SortDirection.ASC)
        self._recompute()

    def sort_indicator(self, key: str) -> str:
        if self.sort is None or self.sort.key != key:
            return ""
        return self.sort.indicator
