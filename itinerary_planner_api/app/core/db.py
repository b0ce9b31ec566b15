"""
SQLite persistence for itineraries and a simple migration system.

``ItineraryStore`` owns a single SQLite connection and the schema of
the ``itineraries`` table.  The application creates one store, calls
``initialize`` on startup and ``close`` on shutdown; the store can
also be used as a context manager.

Rows are exchanged as plain dictionaries of column values.  Turning
them into structured records is the job of
``services.serialization``.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order, so
``initialize`` can run on every process start without touching
existing data.
"""

import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .errors import StorageError

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

# Millisecond-resolution UTC timestamp; sorts lexicographically.
TIMESTAMP_SQL = "strftime('%Y-%m-%d %H:%M:%f', 'now')"

COLUMNS = (
    "id",
    "title",
    "destination",
    "duration",
    "budget",
    "type",
    "interests",
    "activities",
    "content",
)

MIGRATIONS: List[tuple] = [
    # Migration 1: initial schema
    (
        1,
        f"""
        CREATE TABLE IF NOT EXISTS itineraries (
            id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            destination TEXT NOT NULL,
            duration INTEGER,
            budget TEXT,
            type TEXT,
            interests TEXT NOT NULL DEFAULT '[]',
            activities TEXT NOT NULL DEFAULT '[]',
            content TEXT NOT NULL,
            created_at TEXT NOT NULL DEFAULT ({TIMESTAMP_SQL})
        );
        """,
    ),
    # Migration 2: listing is always newest first
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_itineraries_created_at ON itineraries(created_at);
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Resolve ``database_url`` to a filesystem path.

    Absolute paths and ``:memory:`` are returned unchanged; relative
    paths are resolved against the project root.
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class ItineraryStore:
    """Durable table of itinerary rows keyed by ``id``."""

    def __init__(self, database_path: str) -> None:
        self.database_path = database_path
        self._conn: Optional[sqlite3.Connection] = None
        # One connection shared by all requests; writes are serialized.
        self._lock = threading.Lock()

    def __enter__(self) -> "ItineraryStore":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self) -> None:
        """Open the connection if needed and apply pending migrations."""
        with self._lock:
            if self._conn is None:
                try:
                    conn = sqlite3.connect(self.database_path, check_same_thread=False)
                except sqlite3.Error as exc:
                    raise StorageError(f"Cannot open database {self.database_path}: {exc}") from exc
                # Return rows as dict-like objects keyed by column name
                conn.row_factory = sqlite3.Row
                self._conn = conn
            try:
                self._migrate(self._conn)
            except sqlite3.Error as exc:
                raise StorageError(f"Schema migration failed: {exc}") from exc
        logger.info("Itinerary store ready at %s", self.database_path)

    def close(self) -> None:
        """Close the connection.  Calling it twice is harmless."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info("Itinerary store closed")

    @staticmethod
    def _migrate(conn: sqlite3.Connection) -> None:
        cursor = conn.cursor()
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0
        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                logger.debug("Applied migration %s", version)
                current_version = version
        conn.commit()

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor under the store lock and commit on success.

        Any ``sqlite3.Error`` is rolled back and re-raised as
        ``StorageError``.
        """
        with self._lock:
            if self._conn is None:
                raise StorageError("Itinerary store is not initialized")
            conn = self._conn
            try:
                yield conn.cursor()
                conn.commit()
            except sqlite3.IntegrityError as exc:
                conn.rollback()
                raise StorageError(f"Constraint violation: {exc}") from exc
            except sqlite3.Error as exc:
                conn.rollback()
                raise StorageError(str(exc)) from exc

    # ------------------------------------------------------------------
    # Row operations
    # ------------------------------------------------------------------
    def insert(self, row: Dict[str, Any]) -> None:
        """Persist a fully formed row.

        ``created_at`` is assigned here and never goes backwards: if the
        clock reads earlier than the newest stored timestamp, the newest
        timestamp is reused.
        """
        placeholders = ", ".join("?" for _ in COLUMNS)
        with self._cursor() as cursor:
            cursor.execute(
                f"""
                INSERT INTO itineraries ({", ".join(COLUMNS)}, created_at)
                VALUES ({placeholders}, MAX({TIMESTAMP_SQL},
                        COALESCE((SELECT MAX(created_at) FROM itineraries), '')))
                """,
                tuple(row[column] for column in COLUMNS),
            )

    def select_all(self) -> List[Dict[str, Any]]:
        with self._cursor() as cursor:
            rows = cursor.execute(
                "SELECT * FROM itineraries ORDER BY created_at DESC, rowid DESC"
            ).fetchall()
        return [dict(r) for r in rows]

    def select_by_id(self, itinerary_id: str) -> Optional[Dict[str, Any]]:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT * FROM itineraries WHERE id = ?", (itinerary_id,)
            ).fetchone()
        return dict(row) if row else None

    def update_title(self, itinerary_id: str, title: str) -> None:
        with self._cursor() as cursor:
            cursor.execute(
                "UPDATE itineraries SET title = ? WHERE id = ?", (title, itinerary_id)
            )

    def delete_by_id(self, itinerary_id: str) -> None:
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM itineraries WHERE id = ?", (itinerary_id,))
