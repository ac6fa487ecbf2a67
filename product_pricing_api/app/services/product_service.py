"""
Service layer for products.

Each product references one series.  The reference is checked when the
product is created (lookup before insert; there is no foreign key, and
since series are never deleted the gap between the two statements is
harmless).  On every read the series is joined in and exposed as
``series: {_id, name}``.

The public listing differs from the authenticated one only in the
columns returned: ``purchasePrice`` and ``source`` are left out.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import Database, new_object_id
from ..core.exceptions import InvalidReference, NotFound
from ..schemas.product import ProductCreate, ProductPublic, ProductRead, SeriesRef

logger = logging.getLogger(__name__)

_SELECT_PRODUCTS = """
    SELECT p.id, p.name, p.capacity, p.color, p.code, p.battery, p.condition,
           p.selling_price, p.purchase_price, p.source, p.series_id,
           s.name AS series_name
    FROM products p
    LEFT JOIN series s ON s.id = p.series_id
"""


class ProductService:
    """Service class for creating and reading products."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def create_product(self, data: ProductCreate) -> ProductRead:
        """Insert a product after checking that its series exists.

        Raises ``InvalidReference`` when ``series_id`` is missing or
        does not match a series; nothing is written in that case.
        """
        series = None
        if data.series_id:
            series = self.db.fetchone("SELECT id FROM series WHERE id = ?", (data.series_id,))
        if series is None:
            raise InvalidReference("Series not found")
        product_id = new_object_id()
        self.db.execute(
            """
            INSERT INTO products (id, name, capacity, color, code, battery, condition,
                                  selling_price, purchase_price, source, series_id)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                product_id,
                data.name,
                data.capacity,
                data.color,
                data.code,
                data.battery,
                data.condition,
                data.selling_price,
                data.purchase_price,
                data.source,
                series["id"],
            ),
        )
        logger.info("Created product %s in series %s", product_id, series["id"])
        return await self.get_product(product_id)

    async def list_products(self, public_view: bool = True) -> List[ProductPublic]:
        """Return every product.

        With ``public_view`` the records are :class:`ProductPublic`
        instances, otherwise full :class:`ProductRead` records.
        """
        rows = self.db.fetchall(_SELECT_PRODUCTS + " ORDER BY p.rowid")
        if public_view:
            return [self._row_to_product_public(row) for row in rows]
        return [self._row_to_product_read(row) for row in rows]

    async def get_product(self, product_id: str) -> ProductRead:
        row = self.db.fetchone(_SELECT_PRODUCTS + " WHERE p.id = ?", (product_id,))
        if row is None:
            raise NotFound("Product not found")
        return self._row_to_product_read(row)

    async def list_products_by_series(self, series_id: str) -> List[ProductRead]:
        """Return the products of one series.

        Raises ``NotFound`` if the series itself does not exist; an
        existing series without products gives an empty list.
        """
        series = self.db.fetchone("SELECT id FROM series WHERE id = ?", (series_id,))
        if series is None:
            raise NotFound("Series not found")
        rows = self.db.fetchall(_SELECT_PRODUCTS + " WHERE p.series_id = ? ORDER BY p.rowid", (series_id,))
        return [self._row_to_product_read(row) for row in rows]

    @staticmethod
    def _series_ref(row: sqlite3.Row) -> Optional[SeriesRef]:
        if row["series_name"] is None:
            return None
        return SeriesRef(id=row["series_id"], name=row["series_name"])

    @classmethod
    def _row_to_product_public(cls, row: sqlite3.Row) -> ProductPublic:
        return ProductPublic(
            id=row["id"],
            name=row["name"],
            capacity=row["capacity"],
            color=row["color"],
            code=row["code"],
            battery=row["battery"],
            condition=row["condition"],
            selling_price=row["selling_price"],
            series=cls._series_ref(row),
        )

    @classmethod
    def _row_to_product_read(cls, row: sqlite3.Row) -> ProductRead:
        return ProductRead(
            id=row["id"],
            name=row["name"],
            capacity=row["capacity"],
            color=row["color"],
            code=row["code"],
            battery=row["battery"],
            condition=row["condition"],
            selling_price=row["selling_price"],
            purchase_price=row["purchase_price"],
            source=row["source"],
            series=cls._series_ref(row),
        )
