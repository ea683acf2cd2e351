"""
SQLite storage for service snapshots and a simple migration system.

The live state is held in memory by ``core.store``; this module only
provides the durable home for its snapshots.  It offers a connection
factory (``get_connection``), a cursor context manager that commits on
success (``get_cursor``) and ``init_db`` which applies pending schema
migrations.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: snapshot tables for the four record stores
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS attractions (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            description TEXT NOT NULL DEFAULT '',
            latitude REAL NOT NULL,
            longitude REAL NOT NULL,
            category TEXT NOT NULL,
            image_url TEXT NOT NULL DEFAULT '',
            audio_url TEXT NOT NULL DEFAULT '',
            rating REAL NOT NULL DEFAULT 0,
            price INTEGER NOT NULL DEFAULT 0,
            languages TEXT NOT NULL DEFAULT '[]',
            tags TEXT NOT NULL DEFAULT '[]',
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP NOT NULL
        );

        CREATE TABLE IF NOT EXISTS reviews (
            id INTEGER PRIMARY KEY,
            attraction_id INTEGER NOT NULL,
            user_id TEXT NOT NULL,
            rating INTEGER NOT NULL,
            comment TEXT NOT NULL DEFAULT '',
            photos TEXT NOT NULL DEFAULT '[]',
            created_at TIMESTAMP NOT NULL,
            FOREIGN KEY(attraction_id) REFERENCES attractions(id)
        );

        CREATE TABLE IF NOT EXISTS user_profiles (
            id TEXT PRIMARY KEY,
            username TEXT NOT NULL,
            email TEXT NOT NULL,
            preferred_language TEXT NOT NULL,
            visited_attractions TEXT NOT NULL DEFAULT '[]',
            favorite_attractions TEXT NOT NULL DEFAULT '[]',
            total_spent INTEGER NOT NULL DEFAULT 0,
            created_at TIMESTAMP NOT NULL
        );

        CREATE TABLE IF NOT EXISTS payment_transactions (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            attraction_id INTEGER NOT NULL,
            amount INTEGER NOT NULL,
            currency TEXT NOT NULL,
            payment_method TEXT NOT NULL,
            status TEXT NOT NULL DEFAULT 'pending',
            qr_code_data TEXT NOT NULL,
            created_at TIMESTAMP NOT NULL,
            FOREIGN KEY(attraction_id) REFERENCES attractions(id)
        );

        -- Monotonic id counters.  The presence of rows here marks that a
        -- snapshot has been written at least once.
        CREATE TABLE IF NOT EXISTS counters (
            name TEXT PRIMARY KEY,
            value INTEGER NOT NULL
        );
        """,
    ),
    # Migration 2: indices used when inspecting snapshots by attraction
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_reviews_attraction_id ON reviews(attraction_id);
        CREATE INDEX IF NOT EXISTS idx_payment_transactions_user_id ON payment_transactions(user_id);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used as is; relative ones are resolved against
    the package root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # tuzla_guide_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Timestamps are stored as ISO strings and parsed by the
    pydantic schemas, so no SQLite type detection is enabled.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor; commit on success, roll back on error, always close."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db() -> None:
    """Create the database file if needed and apply pending migrations."""
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying database migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
