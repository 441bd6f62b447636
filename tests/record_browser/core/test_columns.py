from __future__ import annotations

import pytest

from record_browser.core.columns import (
    MIN_COLUMN_WIDTH,
    ColumnKind,
    ColumnLayout,
    default_columns,
    is_sortable,
)
from record_browser.core.record import Record


def test_default_table_has_one_descriptor_per_field():
    layout = ColumnLayout()
    assert layout.keys == ["id", "name", "explanation", "rating", "powers", "tips"]
    assert all(c.visible for c in layout)


def test_sequence_columns_are_never_sortable():
    layout = ColumnLayout()
    assert not layout.get("powers").sortable
    assert not layout.get("tips").sortable
    assert layout.get("rating").sortable
    assert is_sortable("name")
    assert not is_sortable("tips")
    assert not is_sortable("unknown")


def test_format_cell_for_scalar_and_sequence():
    layout = ColumnLayout()
    record = Record(id=7, name="Eevee", rating=80, powers=["Tackle", "Bite"], tips=[])

    assert layout.get("id").format_cell(record) == "7"
    assert layout.get("powers").format_cell(record) == "Tackle, Bite"
    assert layout.get("tips").format_cell(record) == ""
    assert layout.get("powers").kind is ColumnKind.STRING_SEQUENCE


def test_resize_tracks_delta_from_baseline():
    layout = ColumnLayout()
    layout.resize_start("name", 100)
    layout.resize_track(130)
    assert layout.get("name").width == 180
    layout.resize_track(90)
    assert layout.get("name").width == 140
    layout.resize_end()
    assert layout.resize_session is None


@pytest.mark.parametrize("pointer_x", [-1000, -101, 0, 40])
def test_resize_never_goes_below_floor(pointer_x):
    layout = ColumnLayout()
    layout.resize_start("id", 100)
    layout.resize_track(pointer_x)
    assert layout.get("id").width >= MIN_COLUMN_WIDTH


def test_resize_only_touches_the_dragged_column():
    layout = ColumnLayout()
    before = {c.key: c.width for c in layout}
    layout.resize_start("explanation", 0)
    layout.resize_track(50)
    layout.resize_end()

    after = {c.key: c.width for c in layout}
    assert after.pop("explanation") == 350
    before.pop("explanation")
    assert after == before


def test_stray_track_and_end_without_session_are_ignored():
    layout = ColumnLayout()
    widths = [c.width for c in layout]
    layout.resize_track(500)
    layout.resize_end()
    assert [c.width for c in layout] == widths


def test_resize_unknown_key_is_noop():
    layout = ColumnLayout()
    layout.resize_start("nope", 10)
    assert layout.resize_session is None


def test_resizing_context_always_ends_session():
    layout = ColumnLayout()
    with pytest.raises(RuntimeError):
        with layout.resizing("rating", 0) as active:
            active.resize_track(30)
            raise RuntimeError("pointer lost")

    assert layout.resize_session is None
    assert layout.get("rating").width == 150


def test_drag_reorder_moves_source_to_target_position():
    layout = ColumnLayout()
    layout.drag_reorder("id", "explanation")
    assert layout.keys == ["name", "explanation", "id", "rating", "powers", "tips"]

    layout.drag_reorder("tips", "name")
    assert layout.keys == ["tips", "name", "explanation", "id", "rating", "powers"]


def test_drag_reorder_is_a_reversible_permutation():
    layout = ColumnLayout()
    original = layout.keys

    layout.drag_reorder("rating", "id")
    assert sorted(layout.keys) == sorted(original)

    # move it back onto whatever now sits at its old index
    old_index = original.index("rating")
    layout.drag_reorder("rating", layout.keys[old_index])
    assert layout.keys == original


def test_layout_does_not_reorder_callers_list():
    columns = default_columns()
    layout = ColumnLayout(columns)

    layout.drag_reorder("id", "tips")

    assert layout.keys[-1] == "id"
    assert [c.key for c in columns][0] == "id"


def test_drag_reorder_noops():
    layout = ColumnLayout()
    original = layout.keys
    layout.drag_reorder("name", "name")
    layout.drag_reorder("name", "missing")
    layout.drag_reorder("missing", "name")
    assert layout.keys == original


def test_toggle_visible_keeps_order_and_width():
    layout = ColumnLayout()
    layout.toggle_visible("explanation")
    assert not layout.get("explanation").visible
    assert layout.get("explanation").width == 300
    assert [c.key for c in layout.visible_columns()] == ["id", "name", "rating", "powers", "tips"]

    layout.toggle_visible("explanation")
    assert layout.get("explanation").visible
    layout.toggle_visible("unknown")
    assert len(layout) == len(default_columns())


def test_snapshot_reports_kind_and_sortability():
    snap = ColumnLayout().snapshot()
    powers = next(row for row in snap if row["key"] == "powers")
    assert powers["kind"] == "string_sequence"
    assert powers["sortable"] is False
