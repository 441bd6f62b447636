from __future__ import annotations

import pytest

from record_browser.core.exceptions import TransportError
from record_browser.core.record import RecordDraft
from record_browser.core.record_store import LOAD_ERROR_MESSAGE, RecordStore
from record_browser.core.view_engine import SortDirection
from record_browser.validation.errors import ValidationError


def _ids(records):
    return [r.id for r in records]


def test_load_populates_canonical_and_display(store):
    assert _ids(store.records) == [1, 2, 3]
    assert _ids(store.display) == [1, 2, 3]
    assert store.loading is False
    assert store.error == ""


def test_load_failure_keeps_previous_records(store, gateway):
    gateway.fail = True
    assert store.load() is False

    assert store.error == LOAD_ERROR_MESSAGE
    assert store.loading is False
    assert _ids(store.records) == [1, 2, 3]
    assert _ids(store.display) == [1, 2, 3]


def test_load_reapplies_active_search_and_sort(store, gateway):
    store.search("a")
    store.sort_by("name")
    gateway.records.reverse()

    store.load()
    assert [r.name for r in store.display] == ["Bulba", "Char", "Pika"]


def test_search_then_sort_toggle_scenario(store):
    store.search("pik")
    assert _ids(store.display) == [1]

    store.search("")
    store.sort_by("rating")
    assert store.sort.direction is SortDirection.ASC
    ascending = _ids(store.display)

    store.sort_by("rating")
    assert store.sort.direction is SortDirection.DESC
    assert _ids(store.display) == [1, 2, 3]
    assert ascending == [2, 3, 1]


def test_double_toggle_returns_to_first_sorted_order(store):
    store.sort_by("name")
    first = _ids(store.display)
    store.sort_by("name")
    store.sort_by("name")
    assert _ids(store.display) == first


def test_sort_by_new_key_starts_ascending(store):
    store.sort_by("rating")
    store.sort_by("rating")
    store.sort_by("name")
    assert store.sort.key == "name"
    assert store.sort.direction is SortDirection.ASC


def test_sort_by_non_sortable_key_is_noop(store):
    store.sort_by("name")
    before = (store.sort, _ids(store.display))

    store.sort_by("powers")
    store.sort_by("tips")
    store.sort_by("does-not-exist")
    assert (store.sort, _ids(store.display)) == before


def test_sort_indicator(store):
    assert store.sort_indicator("name") == ""
    store.sort_by("name")
    assert store.sort_indicator("name") == "▲"
    assert store.sort_indicator("rating") == ""
    store.sort_by("name")
    assert store.sort_indicator("name") == "▼"


def test_create_with_blank_name_is_rejected_without_backend_call(store, gateway):
    with pytest.raises(ValidationError) as exc:
        store.create(RecordDraft(name="", rating=50))

    assert exc.value.codes == ["missing_name"]
    assert gateway.calls == []
    assert _ids(store.records) == [1, 2, 3]


def test_create_with_zero_rating_is_rejected(store, gateway):
    with pytest.raises(ValidationError) as exc:
        store.create(RecordDraft(name="Mew", rating=0))
    assert exc.value.codes == ["missing_rating"]
    assert gateway.calls == []


def test_create_appends_backend_record_and_recomputes(store, gateway):
    store.search("mew")
    created = store.create(RecordDraft(name="Mew", rating=99, powers=[" Psychic ", " "]))

    assert created.id == 4
    assert _ids(store.records) == [1, 2, 3, 4]
    assert _ids(store.display) == [4]
    sent = gateway.calls[0][1]
    assert sent.powers == ["Psychic"]


def test_create_transport_failure_leaves_store_unchanged(store, gateway):
    gateway.fail = True
    with pytest.raises(TransportError):
        store.create(RecordDraft(name="Mew", rating=99))
    assert _ids(store.records) == [1, 2, 3]


def test_update_replaces_in_place(store):
    updated = store.update(2, RecordDraft(id=2, name="Charmeleon", rating=80))

    assert updated.name == "Charmeleon"
    assert _ids(store.records) == [1, 2, 3]
    assert store.get(2).name == "Charmeleon"
    assert store.records[1].rating == 80


def test_update_validates_before_calling_backend(store, gateway):
    with pytest.raises(ValidationError):
        store.update(2, RecordDraft(id=2, name="  ", rating=None))
    assert gateway.calls == []
    assert store.get(2).name == "Char"


def test_update_of_unknown_id_is_accepted_without_local_change(store, gateway):
    before = store.records
    store.update(42, RecordDraft(id=42, name="Ghost", rating=10))
    assert gateway.calls[0][0] == "update"
    assert store.records == before


def test_update_failure_keeps_original(store, gateway):
    gateway.fail = True
    with pytest.raises(TransportError):
        store.update(1, RecordDraft(id=1, name="Raichu", rating=95))
    assert store.get(1).name == "Pika"


def test_delete_removes_record_and_recomputes_display(store):
    store.sort_by("rating")
    store.delete(1)

    assert 1 not in _ids(store.records)
    assert _ids(store.display) == [2, 3]


def test_delete_failure_keeps_record(store, gateway):
    gateway.fail = True
    with pytest.raises(TransportError):
        store.delete(1)
    assert _ids(store.records) == [1, 2, 3]


def test_fresh_store_is_empty(gateway):
    s = RecordStore(gateway)
    assert s.records == []
    assert s.display == []
    assert s.sort is None
