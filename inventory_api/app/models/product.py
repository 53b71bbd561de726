"""Product entity as stored in the ``products`` table."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """A stored product.

    ``id`` is ``0`` until the repository inserts the row and assigns
    the real identifier; after that it never changes.
    """

    name: str
    quantity: int
    price: Decimal
    description: Optional[str] = None
    id: int = 0
