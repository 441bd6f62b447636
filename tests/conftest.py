from __future__ import annotations

import copy
from typing import List

import pytest

from record_browser.core.exceptions import TransportError
from record_browser.core.record import Record, RecordDraft
from record_browser.core.record_store import RecordStore
from record_browser.services.gateway import BackendGateway


class FakeGateway(BackendGateway):
    """
    In-memory backend that records every call. Set `fail = True` to make the
    next calls raise TransportError.
    """

    def __init__(self, records: List[Record] | None = None):
        self.records: List[Record] = copy.deepcopy(records or [])
        self.calls: List[tuple] = []
        self.fail = False
        self._next_id = max((r.id for r in self.records), default=0) + 1

    def _check(self):
        if self.fail:
            raise TransportError("backend unavailable")

    def list_records(self) -> List[Record]:
        self.calls.append(("list",))
        self._check()
        return copy.deepcopy(self.records)

    def create_record(self, draft: RecordDraft) -> Record:
        self.calls.append(("create", copy.deepcopy(draft)))
        self._check()
        record = Record(
            id=self._next_id,
            name=draft.name,
            explanation=draft.explanation,
            rating=draft.rating,
            powers=list(draft.powers),
            image_ref=draft.image_ref,
            tips=list(draft.tips),
        )
        self._next_id += 1
        self.records.append(record)
        return copy.deepcopy(record)

    def update_record(self, record_id: int, draft: RecordDraft) -> Record:
        self.calls.append(("update", record_id, copy.deepcopy(draft)))
        self._check()
        record = Record(
            id=record_id,
            name=draft.name,
            explanation=draft.explanation,
            rating=draft.rating,
            powers=list(draft.powers),
            image_ref=draft.image_ref,
            tips=list(draft.tips),
        )
        self.records = [record if r.id == record_id else r for r in self.records]
        return copy.deepcopy(record)

    def delete_record(self, record_id: int) -> None:
        self.calls.append(("delete", record_id))
        self._check()
        self.records = [r for r in self.records if r.id != record_id]


def make_records() -> List[Record]:
    return [
        Record(
            id=1,
            name="Pika",
            explanation="Electric mouse",
            rating=90,
            powers=["Thunderbolt", "Quick Attack"],
            tips=["Use a Great Ball"],
        ),
        Record(
            id=2,
            name="Char",
            explanation="Fire lizard",
            rating=70,
            powers=["Ember"],
            tips=["Catch near volcanoes"],
        ),
        Record(
            id=3,
            name="Bulba",
            explanation="Seed on its back",
            rating=70,
            powers=["Vine Whip"],
            tips=[],
        ),
    ]


@pytest.fixture
def records() -> List[Record]:
    return make_records()


@pytest.fixture
def gateway(records) -> FakeGateway:
    return FakeGateway(records)


@pytest.fixture
def store(gateway):
    s = RecordStore(gateway)
    assert s.load() is True
    gateway.calls.clear()
    return s
