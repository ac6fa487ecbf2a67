"""
Service layer for series.

Series are create‑only: there is no update or delete.  Name
uniqueness is enforced by a UNIQUE constraint, which the database
layer reports as ``ValidationConflict``.
"""

import logging
import sqlite3
from typing import List

from ..core.db import Database, new_object_id
from ..core.exceptions import NotFound
from ..schemas.series import SeriesCreate, SeriesRead

logger = logging.getLogger(__name__)


class SeriesService:
    """Service class for managing series."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def create_series(self, data: SeriesCreate) -> SeriesRead:
        series_id = new_object_id()
        self.db.execute("INSERT INTO series (id, name) VALUES (?, ?)", (series_id, data.name))
        logger.info("Created series %s (%s)", series_id, data.name)
        return SeriesRead(id=series_id, name=data.name)

    async def list_series(self) -> List[SeriesRead]:
        """Return all series in insertion order."""
        rows = self.db.fetchall("SELECT id, name FROM series ORDER BY rowid")
        return [self._row_to_series_read(row) for row in rows]

    async def get_series(self, series_id: str) -> SeriesRead:
        row = self.db.fetchone("SELECT id, name FROM series WHERE id = ?", (series_id,))
        if row is None:
            raise NotFound("Series not found")
        return self._row_to_series_read(row)

    @staticmethod
    def _row_to_series_read(row: sqlite3.Row) -> SeriesRead:
        return SeriesRead(id=row["id"], name=row["name"])
