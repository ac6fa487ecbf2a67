"""
SQLite database integration and simple migration system.

The :class:`Database` class owns the single connection shared by every
request.  It is opened once when the application starts (see
``main.create_app``), carried by the application context and closed at
shutdown.  Migrations are stored as versioned SQL scripts; applied
versions are recorded in the ``migrations`` table and new ones are run
in order.

Driver errors never leave this module as ``sqlite3`` exceptions: unique
constraint violations become :class:`ValidationConflict` and every other
fault becomes :class:`StoreError`, both carrying the driver's message.

``products.series_id`` is a plain column, not a foreign key: the product
service looks the series up before inserting.
"""

import logging
import os
import secrets
import sqlite3
from pathlib import Path
from typing import Any, List, Optional, Sequence

from .exceptions import StoreError, StoreUnavailable, ValidationConflict

logger = logging.getLogger(__name__)

MIGRATIONS: List[tuple] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            username TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS series (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL UNIQUE,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS products (
            id TEXT PRIMARY KEY,
            name TEXT,
            capacity TEXT,
            color TEXT,
            code TEXT,
            battery TEXT,
            condition TEXT,
            selling_price REAL,
            purchase_price REAL,
            source TEXT,
            series_id TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
    # Migration 2: index for listing products by series
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_products_series_id ON products(series_id);
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are returned unchanged.  Relative
    paths are resolved against the project root.
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


def new_object_id() -> str:
    """Return a new opaque record identifier (24 lowercase hex chars)."""
    return secrets.token_hex(12)


class Database:
    """Single shared SQLite connection with error translation."""

    def __init__(self, database_url: str) -> None:
        self.path = get_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreUnavailable()
        return self._conn

    def connect(self) -> None:
        """Open the connection and apply pending migrations."""
        try:
            conn = sqlite3.connect(self.path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
        except sqlite3.Error as exc:
            raise StoreUnavailable(f"Could not connect to database: {exc}") from exc
        self._conn = conn
        try:
            self.init_db()
        except StoreError:
            self.close()
            raise
        logger.info("Connected to database %s", self.path)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def init_db(self) -> None:
        """Apply pending migrations.

        Creates the ``migrations`` table if it does not exist, checks
        the current schema version and applies any newer entries of
        ``MIGRATIONS``.  Append new migrations with an incremented
        version number.
        """
        conn = self.connection
        try:
            conn.execute(
                "CREATE TABLE IF NOT EXISTS migrations ("
                "version INTEGER PRIMARY KEY, "
                "applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP)"
            )
            row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current = row["version"] or 0
            for version, script in MIGRATIONS:
                if version <= current:
                    continue
                conn.executescript(script)
                conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                conn.commit()
                logger.info("Applied migration %s", version)
        except sqlite3.Error as exc:
            conn.rollback()
            raise StoreError(str(exc)) from exc

    def fetchone(self, query: str, params: Sequence[Any] = ()) -> Optional[sqlite3.Row]:
        try:
            return self.connection.execute(query, params).fetchone()
        except sqlite3.Error as exc:
            logger.error("Query failed: %s", exc)
            raise StoreError(str(exc)) from exc

    def fetchall(self, query: str, params: Sequence[Any] = ()) -> List[sqlite3.Row]:
        try:
            return self.connection.execute(query, params).fetchall()
        except sqlite3.Error as exc:
            logger.error("Query failed: %s", exc)
            raise StoreError(str(exc)) from exc

    def execute(self, query: str, params: Sequence[Any] = ()) -> int:
        """Run a write statement, commit it and return the affected row count."""
        conn = self.connection
        try:
            cursor = conn.execute(query, params)
            conn.commit()
            return cursor.rowcount
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            if "UNIQUE" in str(exc):
                raise ValidationConflict(str(exc)) from exc
            raise StoreError(str(exc)) from exc
        except sqlite3.Error as exc:
            conn.rollback()
            logger.error("Write failed: %s", exc)
            raise StoreError(str(exc)) from exc
