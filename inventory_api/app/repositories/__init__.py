"""Data access objects working on an open SQLite connection."""

from .product_repository import ProductRepository

__all__ = ["ProductRepository"]
