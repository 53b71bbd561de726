"""
Persisted entities.

Entities describe rows as the application stores them and are kept
separate from the API schemas so the wire format can change without
touching storage.
"""

from .product import Product

__all__ = ["Product"]
