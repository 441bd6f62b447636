from __future__ import annotations

import pytest

from record_browser.core.exceptions import TransportError
from record_browser.core.form_buffer import FormBufferManager, FormMode
from record_browser.validation.errors import ValidationError


def test_open_create_starts_empty():
    forms = FormBufferManager()
    buffer = forms.open_create()

    assert forms.is_open
    assert buffer.mode is FormMode.CREATE
    assert buffer.draft.id is None
    assert buffer.draft.name == ""
    assert buffer.draft.rating == 0
    assert buffer.draft.powers == []
    assert buffer.pending_power == ""
    assert buffer.pending_tip == ""


def test_open_edit_deep_copies_source(store):
    forms = FormBufferManager()
    source = store.get(1)
    buffer = forms.open_edit(source)

    buffer.draft.name = "Changed"
    forms.add_list_item("powers", "Iron Tail")
    forms.remove_list_item("tips", 0)

    assert source.name == "Pika"
    assert source.powers == ["Thunderbolt", "Quick Attack"]
    assert source.tips == ["Use a Great Ball"]
    assert buffer.draft.powers == ["Thunderbolt", "Quick Attack", "Iron Tail"]


def test_add_list_item_trims_and_clears_scratch():
    forms = FormBufferManager()
    forms.open_create()
    forms.set_pending("powers", "  Surf  ")

    assert forms.add_list_item("powers") is True
    assert forms.buffer.draft.powers == ["Surf"]
    assert forms.buffer.pending_power == ""


def test_add_blank_item_is_ignored():
    forms = FormBufferManager()
    forms.open_create()
    forms.set_pending("tips", "   ")

    assert forms.add_list_item("tips") is False
    assert forms.buffer.draft.tips == []
    assert forms.buffer.pending_tip == "   "


def test_duplicates_are_kept_in_order():
    forms = FormBufferManager()
    forms.open_create()
    for item in ["a", "b", "a"]:
        forms.add_list_item("tips", item)
    assert forms.buffer.draft.tips == ["a", "b", "a"]


def test_remove_out_of_bounds_is_noop():
    forms = FormBufferManager()
    forms.open_create()
    forms.add_list_item("powers", "Surf")

    assert forms.remove_list_item("powers", 5) is False
    assert forms.remove_list_item("powers", -1) is False
    assert forms.buffer.draft.powers == ["Surf"]
    assert forms.remove_list_item("powers", 0) is True
    assert forms.buffer.draft.powers == []


def test_unknown_list_field_raises():
    forms = FormBufferManager()
    forms.open_create()
    with pytest.raises(ValueError):
        forms.add_list_item("moves", "x")
    with pytest.raises(ValueError):
        forms.set_field("id", 3)


def test_operations_without_open_buffer_do_nothing():
    forms = FormBufferManager()
    assert forms.add_list_item("powers", "x") is False
    assert forms.remove_list_item("powers", 0) is False
    forms.set_field("name", "x")
    assert forms.buffer is None


def test_close_discards_buffer():
    forms = FormBufferManager()
    forms.open_create()
    forms.close()
    assert not forms.is_open
    assert forms.mode is None


def test_submit_create_appends_and_closes(store):
    forms = FormBufferManager()
    forms.open_create()
    forms.set_field("name", "Mew")
    forms.set_field("rating", "99")
    forms.add_list_item("powers", "Psychic")

    record = forms.submit(store)
    assert record.name == "Mew"
    assert record.rating == 99
    assert store.get(record.id) is not None
    assert not forms.is_open


def test_submit_edit_replaces_record(store):
    forms = FormBufferManager()
    forms.open_edit(store.get(2))
    forms.set_field("name", "Charizard")

    forms.submit(store)
    assert store.get(2).name == "Charizard"
    assert [r.id for r in store.records] == [1, 2, 3]


def test_submit_rejected_locally_keeps_buffer_open(store, gateway):
    forms = FormBufferManager()
    forms.open_create()
    forms.set_field("name", "Mew")

    with pytest.raises(ValidationError):
        forms.submit(store)
    assert forms.is_open
    assert gateway.calls == []


def test_submit_transport_failure_keeps_buffer_open(store, gateway):
    forms = FormBufferManager()
    forms.open_create()
    forms.set_field("name", "Mew")
    forms.set_field("rating", 99)
    gateway.fail = True

    with pytest.raises(TransportError):
        forms.submit(store)
    assert forms.is_open
    assert forms.buffer.draft.name == "Mew"


def test_submit_without_open_form_raises(store):
    with pytest.raises(RuntimeError):
        FormBufferManager().submit(store)
