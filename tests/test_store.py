"""Tests for the SQLite itinerary store."""

import sqlite3

import pytest

from itinerary_planner_api.app.core.db import ItineraryStore, get_database_path
from itinerary_planner_api.app.core.errors import StorageError


def make_row(itinerary_id, title="Trip"):
    return {
        "id": itinerary_id,
        "title": title,
        "destination": "Oslo",
        "duration": 2,
        "budget": "medio",
        "type": "adventurous",
        "interests": '["Natura"]',
        "activities": '["Trekking"]',
        "content": "# Oslo",
    }


def test_select_all_is_empty_on_fresh_store(store):
    assert store.select_all() == []


def test_insert_then_select_by_id(store):
    store.insert(make_row("a"))

    row = store.select_by_id("a")

    assert row["destination"] == "Oslo"
    assert row["interests"] == '["Natura"]'
    assert row["created_at"]


def test_select_by_id_returns_none_for_absent_id(store):
    assert store.select_by_id("missing") is None


def test_duplicate_id_raises_storage_error(store):
    store.insert(make_row("a"))

    with pytest.raises(StorageError):
        store.insert(make_row("a", title="Other"))

    assert store.select_by_id("a")["title"] == "Trip"
    assert len(store.select_all()) == 1


def test_select_all_is_newest_first(store):
    for itinerary_id in ("A", "B", "C"):
        store.insert(make_row(itinerary_id))

    rows = store.select_all()

    assert [r["id"] for r in rows] == ["C", "B", "A"]
    timestamps = [r["created_at"] for r in rows]
    assert timestamps == sorted(timestamps, reverse=True)


def test_created_at_never_goes_backwards(store, db_path):
    # Simulate a row stamped in the future (clock skew).
    store.insert(make_row("first"))
    with sqlite3.connect(db_path) as conn:
        conn.execute("UPDATE itineraries SET created_at = '2999-01-01 00:00:00.000' WHERE id = 'first'")

    store.insert(make_row("second"))

    assert store.select_by_id("second")["created_at"] >= "2999-01-01 00:00:00.000"
    assert [r["id"] for r in store.select_all()] == ["second", "first"]


def test_update_title_changes_only_title(store):
    store.insert(make_row("a"))
    before = store.select_by_id("a")

    store.update_title("a", "Renamed")

    after = store.select_by_id("a")
    assert after["title"] == "Renamed"
    assert {k: v for k, v in after.items() if k != "title"} == {
        k: v for k, v in before.items() if k != "title"
    }


def test_update_title_and_delete_are_noops_for_absent_id(store):
    store.insert(make_row("a"))

    store.update_title("missing", "New")
    store.delete_by_id("missing")

    assert [r["id"] for r in store.select_all()] == ["a"]


def test_delete_removes_row(store):
    store.insert(make_row("a"))

    store.delete_by_id("a")

    assert store.select_by_id("a") is None


def test_initialize_is_idempotent_and_keeps_data(db_path):
    with ItineraryStore(db_path) as first:
        first.insert(make_row("a"))
        first.initialize()
        assert first.select_by_id("a") is not None

    with ItineraryStore(db_path) as second:
        assert [r["id"] for r in second.select_all()] == ["a"]
        versions = [
            r[0] for r in sqlite3.connect(db_path).execute("SELECT version FROM migrations ORDER BY version")
        ]
        assert versions == [1, 2]


def test_operations_after_close_raise_storage_error(db_path):
    store = ItineraryStore(db_path)
    store.initialize()
    store.close()
    store.close()

    assert not store.is_open
    with pytest.raises(StorageError):
        store.select_all()


def test_unopenable_database_raises_storage_error(tmp_path):
    store = ItineraryStore(str(tmp_path / "missing-dir" / "db.sqlite"))

    with pytest.raises(StorageError):
        store.initialize()


def test_in_memory_store():
    with ItineraryStore(":memory:") as store:
        store.insert(make_row("a"))
        assert store.select_by_id("a")["id"] == "a"


def test_get_database_path_resolution(tmp_path):
    assert get_database_path(":memory:") == ":memory:"
    absolute = str(tmp_path / "x.db")
    assert get_database_path(absolute) == absolute
    assert get_database_path("x.db").endswith("x.db")
