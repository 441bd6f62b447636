from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import requests

from record_browser.core.exceptions import TransportError
from record_browser.core.record import Record, RecordDraft

logger = logging.getLogger(__name__)


class BackendGateway(ABC):
    """
    Abstract interface for the remote record collection (HTTP, fixtures, etc.).

    Every method either returns its payload or raises TransportError; callers
    never look at the cause beyond that.
    """

    @abstractmethod
    def list_records(self) -> List[Record]:
        pass

    @abstractmethod
    def create_record(self, draft: RecordDraft) -> Record:
        """Persist a new record; the backend assigns the id."""
        pass

    @abstractmethod
    def update_record(self, record_id: int, draft: RecordDraft) -> Record:
        pass

    @abstractmethod
    def delete_record(self, record_id: int) -> None:
        pass


class HttpBackendGateway(BackendGateway):
    """
    JSON-over-HTTP implementation talking to `{base_url}{records_path}`.
    """

    def __init__(
            self,
            base_url: str,
            records_path: str = "/api/pokemons",
            *,
            timeout: Optional[float] = 10.0,
            session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.records_path = "/" + records_path.strip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def collection_url(self) -> str:
        return f"{self.base_url}{self.records_path}"

    def _record_url(self, record_id: int) -> str:
        return f"{self.collection_url}/{record_id}"

    def _request(self, method: str, url: str, payload: Optional[dict] = None) -> Any:
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"{method} {url} returned a non-JSON body") from e

    def _decode_record(self, data: Any, url: str) -> Record:
        try:
            return Record.from_wire(data)
        except (TypeError, ValueError) as e:
            raise TransportError(f"Malformed record from {url}: {e}") from e

    def list_records(self) -> List[Record]:
        url = self.collection_url
        data = self._request("GET", url)
        if not isinstance(data, list):
            raise TransportError(f"Expected a list of records from {url}")
        records = [self._decode_record(item, url) for item in data]
        logger.debug("Fetched records", extra={"url": url, "n_records": len(records)})
        return records

    def create_record(self, draft: RecordDraft) -> Record:
        url = self.collection_url
        payload = draft.to_wire()
        payload.pop("id", None)
        return self._decode_record(self._request("POST", url, payload), url)

    def update_record(self, record_id: int, draft: RecordDraft) -> Record:
        url = self._record_url(record_id)
        payload = draft.to_wire()
        payload["id"] = record_id
        return self._decode_record(self._request("PUT", url, payload), url)

    def delete_record(self, record_id: int) -> None:
        self._request("DELETE", self._record_url(record_id))
