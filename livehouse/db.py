import logging
import sqlite3
from datetime import date, timedelta
from pathlib import Path
from typing import Optional

from livehouse.models import Event

logger = logging.getLogger(__name__)

# Columns added after the first release; (name, type)
_OPTIONAL_COLUMNS = [
    ("doorPrice", "TEXT"),
    ("artists", "TEXT"),
]

_COLUMNS = "id, date, title, artists, description, openTime, startTime, ticketPrice, doorPrice, imageUrl"


def connect(db_path: Path, ensure_schema: bool = True) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    # Opened and used from different FastAPI threadpool workers
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    if ensure_schema:
        _create_schema(conn)
        _migrate(conn)
    return conn


def _create_schema(conn: sqlite3.Connection) -> None:
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS events (
            id          INTEGER PRIMARY KEY AUTOINCREMENT,
            date        TEXT NOT NULL,
            title       TEXT NOT NULL,
            artists     TEXT,
            description TEXT,
            openTime    TEXT,
            startTime   TEXT,
            ticketPrice TEXT,
            doorPrice   TEXT,
            imageUrl    TEXT
        );
    """)
    conn.commit()


def _existing_columns(conn: sqlite3.Connection) -> set[str]:
    return {row["name"] for row in conn.execute("PRAGMA table_info(events)").fetchall()}


def _migrate(conn: sqlite3.Connection) -> list[str]:
    """Add any optional column an older database is missing. Returns the names added."""
    existing = _existing_columns(conn)
    added = []
    for name, col_type in _OPTIONAL_COLUMNS:
        if name in existing:
            continue
        conn.execute(f"ALTER TABLE events ADD COLUMN {name} {col_type}")
        added.append(name)
    if added:
        conn.commit()
        logger.info("Added columns to events table: %s", ", ".join(added))
    return added


# --- Seed data ---

def _seed_events(today: date) -> list[Event]:
    tomorrow = today + timedelta(days=1)
    next_week = today + timedelta(days=7)
    return [
        Event(
            date=today.isoformat(),
            title="Neon Nights: Synthwave Special",
            artists="The Midnight Runners, Cyber City",
            description="Featuring The Midnight Runners and Cyber City.",
            open_time="18:00",
            start_time="19:00",
            ticket_price="¥2,500",
            door_price="¥3,000",
        ),
        Event(
            date=tomorrow.isoformat(),
            title="Heavy Metal Thunder",
            artists="Iron Fist, Skull Crusher",
            description="Loud noises and headbanging. Earplugs recommended.",
            open_time="17:30",
            start_time="18:30",
            ticket_price="¥3,000",
            door_price="¥3,500",
        ),
        Event(
            date=next_week.isoformat(),
            title="Jazz & Gin",
            artists="Downtown Quartet",
            description="Smooth jazz evening with the Downtown Quartet.",
            open_time="19:00",
            start_time="20:00",
            ticket_price="¥2,000",
            door_price="¥2,500",
        ),
    ]


def count_events(conn: sqlite3.Connection) -> int:
    return conn.execute("SELECT count(*) AS count FROM events").fetchone()["count"]


def seed_if_empty(conn: sqlite3.Connection, today: Optional[date] = None) -> int:
    """Insert the demo events when the table is empty. Returns how many were inserted."""
    if count_events(conn) > 0:
        return 0
    events = _seed_events(today or date.today())
    for event in events:
        create_event(conn, event)
    logger.info("Seeded %d demo events", len(events))
    return len(events)


# --- Events ---

def _params(event: Event) -> dict:
    return {
        "date":        event.date,
        "title":       event.title,
        "artists":     event.artists or "",
        "description": event.description,
        "openTime":    event.open_time,
        "startTime":   event.start_time,
        "ticketPrice": event.ticket_price,
        "doorPrice":   event.door_price or "",
        "imageUrl":    event.image_url or "",
    }


def list_events(conn: sqlite3.Connection) -> list[Event]:
    rows = conn.execute(f"SELECT {_COLUMNS} FROM events ORDER BY date ASC, id ASC").fetchall()
    return [_row_to_event(r) for r in rows]


def get_event(conn: sqlite3.Connection, event_id: int) -> Optional[Event]:
    row = conn.execute(f"SELECT {_COLUMNS} FROM events WHERE id = ?", (event_id,)).fetchone()
    return _row_to_event(row) if row else None


def create_event(conn: sqlite3.Connection, event: Event) -> int:
    cursor = conn.execute(
        """
        INSERT INTO events (date, title, artists, description, openTime, startTime, ticketPrice, doorPrice, imageUrl)
        VALUES (:date, :title, :artists, :description, :openTime, :startTime, :ticketPrice, :doorPrice, :imageUrl)
        """,
        _params(event),
    )
    conn.commit()
    event.id = cursor.lastrowid
    return cursor.lastrowid


def update_event(conn: sqlite3.Connection, event_id: int, event: Event) -> int:
    """Overwrite every column of the row. Returns the number of rows changed (0 if absent)."""
    cursor = conn.execute(
        """
        UPDATE events SET
            date        = :date,
            title       = :title,
            artists     = :artists,
            description = :description,
            openTime    = :openTime,
            startTime   = :startTime,
            ticketPrice = :ticketPrice,
            doorPrice   = :doorPrice,
            imageUrl    = :imageUrl
        WHERE id = :id
        """,
        {**_params(event), "id": event_id},
    )
    conn.commit()
    return cursor.rowcount


def delete_event(conn: sqlite3.Connection, event_id: int) -> int:
    cursor = conn.execute("DELETE FROM events WHERE id = ?", (event_id,))
    conn.commit()
    return cursor.rowcount


def _row_to_event(row: sqlite3.Row) -> Event:
    return Event(
        id=row["id"],
        date=row["date"],
        title=row["title"],
        artists=row["artists"] or "",
        description=row["description"] or "",
        open_time=row["openTime"] or "",
        start_time=row["startTime"] or "",
        ticket_price=row["ticketPrice"] or "",
        door_price=row["doorPrice"] or "",
        image_url=row["imageUrl"] or "",
    )
