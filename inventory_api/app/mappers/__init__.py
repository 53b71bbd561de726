"""Translation between wire schemas, entities and database rows."""

from .product import create_to_product, product_to_read, row_to_product

__all__ = ["create_to_product", "product_to_read", "row_to_product"]
