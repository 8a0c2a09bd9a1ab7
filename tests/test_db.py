import sqlite3
from datetime import date

import livehouse.db as db_module
from livehouse.models import Event


def _event(d, title="Show", **kw):
    return Event(date=d, title=title, open_time="18:00", start_time="19:00", ticket_price="¥2,000", **kw)


def test_seed_inserts_three_demo_events(conn):
    today = date(2026, 10, 17)
    assert db_module.seed_if_empty(conn, today) == 3

    events = db_module.list_events(conn)
    assert [e.date for e in events] == ["2026-10-17", "2026-10-18", "2026-10-24"]
    assert [e.title for e in events] == [
        "Neon Nights: Synthwave Special",
        "Heavy Metal Thunder",
        "Jazz & Gin",
    ]
    assert events[0].door_price == "¥3,000"


def test_seed_skips_non_empty_table(conn):
    db_module.create_event(conn, _event("2026-01-01"))
    assert db_module.seed_if_empty(conn, date(2026, 10, 17)) == 0
    assert db_module.count_events(conn) == 1


def test_list_is_sorted_by_date_for_any_insertion_order(conn):
    for d in ["2026-12-01", "2026-01-15", "2026-06-30", "2025-12-31"]:
        db_module.create_event(conn, _event(d))
    dates = [e.date for e in db_module.list_events(conn)]
    assert dates == sorted(dates)


def test_create_assigns_fresh_ids(conn):
    first = db_module.create_event(conn, _event("2026-01-01"))
    db_module.delete_event(conn, first)
    second = db_module.create_event(conn, _event("2026-01-02"))
    assert second != first
    assert db_module.get_event(conn, second).title == "Show"


def test_optional_columns_stored_as_empty_string(conn):
    event_id = db_module.create_event(conn, _event("2026-01-01"))
    row = conn.execute("SELECT artists, doorPrice, imageUrl FROM events WHERE id = ?", (event_id,)).fetchone()
    assert (row["artists"], row["doorPrice"], row["imageUrl"]) == ("", "", "")


def test_update_replaces_every_field(conn):
    event_id = db_module.create_event(
        conn, _event("2026-01-01", artists="Band", door_price="¥9,000", image_url="/uploads/x.png"),
    )
    changed = db_module.update_event(conn, event_id, Event(date="2026-02-02", title="Renamed"))
    assert changed == 1

    event = db_module.get_event(conn, event_id)
    assert event.title == "Renamed"
    assert event.date == "2026-02-02"
    assert event.artists == ""
    assert event.door_price == ""
    assert event.image_url == ""
    assert event.ticket_price == ""


def test_update_and_delete_missing_id_are_noops(conn):
    assert db_module.update_event(conn, 999, _event("2026-01-01")) == 0
    assert db_module.delete_event(conn, 999) == 0
    assert db_module.list_events(conn) == []


def test_migration_adds_missing_columns_once(tmp_path):
    path = tmp_path / "old.db"
    old = sqlite3.connect(path)
    old.execute(
        "CREATE TABLE events (id INTEGER PRIMARY KEY AUTOINCREMENT, date TEXT NOT NULL, title TEXT NOT NULL, "
        "description TEXT, openTime TEXT, startTime TEXT, ticketPrice TEXT, imageUrl TEXT)"
    )
    old.execute("INSERT INTO events (date, title) VALUES ('2026-01-01', 'Old show')")
    old.commit()
    old.close()

    conn = db_module.connect(path)
    assert {"doorPrice", "artists"} <= db_module._existing_columns(conn)
    assert db_module._migrate(conn) == []
    assert db_module.list_events(conn)[0].title == "Old show"
    conn.close()

    # Reopening an already migrated database is fine too
    db_module.connect(path).close()
