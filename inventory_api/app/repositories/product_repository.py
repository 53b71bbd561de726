"""
Product repository.

Wraps the ``products`` table behind the small set of primitives the
service needs: point lookup, full scan, insert, overwrite and delete.
The repository never opens, commits or closes connections; the
caller owns the connection and its transaction.  All queries use
parameterized statements.
"""

import sqlite3
from dataclasses import replace
from typing import List, Optional

from ..mappers.product import row_to_product
from ..models.product import Product

_COLUMNS = "id, name, quantity, price, description"


class ProductRepository:
    """Data access for ``Product`` entities."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def find(self, product_id: int) -> Optional[Product]:
        row = self.conn.execute(
            f"SELECT {_COLUMNS} FROM products WHERE id = ?",
            (product_id,),
        ).fetchone()
        if not row:
            return None
        return row_to_product(row)

    def scan_all(self) -> List[Product]:
        """Return every product in identifier order."""
        rows = self.conn.execute(
            f"SELECT {_COLUMNS} FROM products ORDER BY id ASC"
        ).fetchall()
        return [row_to_product(row) for row in rows]

    def insert(self, product: Product) -> Product:
        """Insert a new row and return the entity with its assigned id.

        Any ``id`` already set on ``product`` is ignored.
        """
        cursor = self.conn.execute(
            """
            INSERT INTO products (name, quantity, price, description)
            VALUES (?, ?, ?, ?)
            """,
            (product.name, product.quantity, str(product.price), product.description),
        )
        return replace(product, id=cursor.lastrowid)

    def persist(self, product: Product) -> None:
        """Overwrite the stored row for ``product.id`` with its fields."""
        if not product.id:
            raise ValueError("Cannot persist a product that has not been inserted")
        self.conn.execute(
            """
            UPDATE products
            SET name = ?, quantity = ?, price = ?, description = ?
            WHERE id = ?
            """,
            (
                product.name,
                product.quantity,
                str(product.price),
                product.description,
                product.id,
            ),
        )

    def remove(self, product: Product) -> None:
        self.conn.execute("DELETE FROM products WHERE id = ?", (product.id,))
