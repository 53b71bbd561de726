"""
Product mapping functions.

Pure functions with no I/O.  Values are copied verbatim; nothing is
rounded, trimmed or escaped here.  There is deliberately no mapper
from ``ProductUpdate`` to an entity: updates overwrite the fields of
an already loaded ``Product`` in the service.
"""

import sqlite3
from decimal import Decimal

from ..models.product import Product
from ..schemas.product import ProductCreate, ProductRead


def product_to_read(product: Product) -> ProductRead:
    """Project a stored product onto the response schema."""
    return ProductRead(
        id=product.id,
        name=product.name,
        quantity=product.quantity,
        price=product.price,
        description=product.description,
    )


def create_to_product(data: ProductCreate) -> Product:
    """Build an unsaved entity from a create request.

    The identifier is left unset; the repository assigns it on insert.
    """
    return Product(
        name=data.name,
        quantity=data.quantity,
        price=data.price,
        description=data.description,
    )


def row_to_product(row: sqlite3.Row) -> Product:
    """Convert a ``products`` row to an entity."""
    return Product(
        id=row["id"],
        name=row["name"],
        quantity=row["quantity"],
        price=Decimal(row["price"]),
        description=row["description"],
    )
