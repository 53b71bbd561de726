"""
Domain errors raised by the service layer.

Services raise these exceptions and the HTTP layer translates them
into status codes, so the services stay usable without FastAPI.
"""

from typing import Dict, List


class InventoryError(Exception):
    """Base class for all inventory errors."""


class ProductNotFoundError(InventoryError):
    """The identifier does not resolve to a stored product."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class ProductValidationError(InventoryError):
    """A create or update payload breaks a product rule.

    ``issues`` is a list of ``{"field": ..., "message": ...}`` entries,
    one per broken rule.
    """

    def __init__(self, issues: List[Dict[str, str]]) -> None:
        super().__init__("; ".join(f"{i['field']}: {i['message']}" for i in issues))
        self.issues = issues
