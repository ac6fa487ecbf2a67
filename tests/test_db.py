"""
Tests for the SQLite database layer.
"""

import os

import pytest

from product_pricing_api.app.core.db import MIGRATIONS, Database, get_database_path, new_object_id
from product_pricing_api.app.core.exceptions import StoreError, StoreUnavailable, ValidationConflict


class TestDatabase:
    def test_migrations_applied(self, db: Database):
        versions = [row["version"] for row in db.fetchall("SELECT version FROM migrations ORDER BY version")]

        assert versions == [version for version, _ in MIGRATIONS]

    def test_migrations_idempotent(self, db: Database):
        """Running migrations again on an up to date schema changes nothing."""
        db.init_db()

        row = db.fetchone("SELECT COUNT(*) AS count FROM migrations")
        assert row["count"] == len(MIGRATIONS)

    def test_reopen_keeps_data(self, settings):
        first = Database(settings.database_url)
        first.connect()
        first.execute("INSERT INTO series (id, name) VALUES (?, ?)", (new_object_id(), "S1"))
        first.close()

        second = Database(settings.database_url)
        second.connect()
        try:
            assert second.fetchone("SELECT name FROM series")["name"] == "S1"
        finally:
            second.close()

    def test_unique_violation_is_conflict(self, db: Database):
        db.execute("INSERT INTO series (id, name) VALUES (?, ?)", (new_object_id(), "S1"))

        with pytest.raises(ValidationConflict) as exc_info:
            db.execute("INSERT INTO series (id, name) VALUES (?, ?)", (new_object_id(), "S1"))

        assert "UNIQUE constraint failed: series.name" in exc_info.value.message

    def test_conflict_is_store_error(self):
        assert issubclass(ValidationConflict, StoreError)

    def test_driver_error_wrapped(self, db: Database):
        with pytest.raises(StoreError) as exc_info:
            db.fetchall("SELECT * FROM missing_table")

        assert "no such table" in exc_info.value.message

    def test_not_connected(self, settings):
        database = Database(settings.database_url)

        assert not database.is_connected
        with pytest.raises(StoreUnavailable):
            database.fetchall("SELECT 1")

    def test_connect_failure(self, tmp_path):
        database = Database(str(tmp_path / "missing" / "pricing.db"))

        with pytest.raises(StoreUnavailable):
            database.connect()
        assert not database.is_connected

    def test_series_reference_not_a_foreign_key(self, db: Database):
        """Series references are checked by the product service, not by the schema."""
        assert db.fetchall("PRAGMA foreign_key_list(products)") == []

        db.execute("INSERT INTO products (id, name, series_id) VALUES (?, ?, ?)", (new_object_id(), "P", "dangling"))
        assert db.fetchone("SELECT series_id FROM products")["series_id"] == "dangling"

    def test_in_memory(self):
        database = Database(":memory:")
        database.connect()
        try:
            assert database.fetchone("SELECT COUNT(*) AS count FROM products")["count"] == 0
        finally:
            database.close()


class TestHelpers:
    def test_object_id_format(self):
        object_id = new_object_id()

        assert len(object_id) == 24
        int(object_id, 16)

    def test_object_ids_unique(self):
        assert len({new_object_id() for _ in range(100)}) == 100

    def test_relative_path_resolved(self):
        path = get_database_path("pricing.db")

        assert os.path.isabs(path)
        assert path.endswith("pricing.db")

    def test_absolute_and_memory_unchanged(self, tmp_path):
        absolute = str(tmp_path / "pricing.db")

        assert get_database_path(absolute) == absolute
        assert get_database_path(":memory:") == ":memory:"
