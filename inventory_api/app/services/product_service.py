"""
Service layer for products.

Every operation validates its input, opens one connection through
``connection_scope``, performs a single lookup and at most one write
through ``ProductRepository`` and maps the result to a response
schema.  The connection is released on success, on validation
failure and on database errors alike.

Missing products are reported with ``ProductNotFoundError`` and
rejected payloads with ``ProductValidationError``.  There is no
concurrency control: two updates to the same product race and the
last write wins.
"""

from __future__ import annotations

import logging
from typing import Dict, List

from inventory_api.app.core.config import settings
from inventory_api.app.core.db import connection_scope
from inventory_api.app.core.exceptions import ProductNotFoundError, ProductValidationError
from inventory_api.app.mappers.product import create_to_product, product_to_read
from inventory_api.app.repositories.product_repository import ProductRepository
from inventory_api.app.schemas.product import ProductBase, ProductCreate, ProductRead, ProductUpdate

logger = logging.getLogger(__name__)


class ProductService:
    """Service class for managing products."""

    @classmethod
    async def list_products(cls) -> List[ProductRead]:
        """Return all products in store order.  Never fails on an empty store."""
        with connection_scope() as conn:
            products = ProductRepository(conn).scan_all()
        return [product_to_read(p) for p in products]

    @classmethod
    async def get_product(cls, product_id: int) -> ProductRead:
        """Retrieve a single product by its ID."""
        with connection_scope() as conn:
            product = ProductRepository(conn).find(product_id)
        if product is None:
            logger.debug("Product %s not found", product_id)
            raise ProductNotFoundError(product_id)
        return product_to_read(product)

    @classmethod
    async def create_product(cls, data: ProductCreate) -> ProductRead:
        """Insert a new product and return it with its assigned ID."""
        cls._validate(data)
        with connection_scope() as conn:
            product = ProductRepository(conn).insert(create_to_product(data))
        logger.info("Created product %s (%s)", product.id, product.name)
        return product_to_read(product)

    @classmethod
    async def update_product(cls, product_id: int, data: ProductUpdate) -> ProductRead:
        """Overwrite name, quantity, price and description of a product.

        The identifier is never changed.  Sending the same body twice
        leaves the same stored state as sending it once.  A missing
        product is reported before any problem with the body.
        """
        with connection_scope() as conn:
            repository = ProductRepository(conn)
            product = repository.find(product_id)
            if product is None:
                logger.debug("Product %s not found for update", product_id)
                raise ProductNotFoundError(product_id)
            cls._validate(data)
            product.name = data.name
            product.quantity = data.quantity
            product.price = data.price
            product.description = data.description
            repository.persist(product)
        logger.info("Updated product %s", product_id)
        return product_to_read(product)

    @classmethod
    async def delete_product(cls, product_id: int) -> None:
        """Delete a product by ID."""
        with connection_scope() as conn:
            repository = ProductRepository(conn)
            product = repository.find(product_id)
            if product is None:
                logger.debug("Product %s not found for delete", product_id)
                raise ProductNotFoundError(product_id)
            repository.remove(product)
        logger.info("Deleted product %s", product_id)

    @staticmethod
    def _validate(data: ProductBase) -> None:
        """Reject payloads with an empty name or negative amounts.

        Does nothing when ``settings.enforce_product_rules`` is off.
        """
        if not settings.enforce_product_rules:
            return
        issues: List[Dict[str, str]] = []
        if not data.name.strip():
            issues.append({"field": "name", "message": "Product name is required"})
        if data.quantity < 0:
            issues.append({"field": "quantity", "message": "Quantity cannot be negative"})
        if not data.price.is_finite():
            issues.append({"field": "price", "message": "Price must be a finite number"})
        elif data.price < 0:
            issues.append({"field": "price", "message": "Price cannot be negative"})
        if issues:
            logger.info("Rejected product payload: %s", issues)
            raise ProductValidationError(issues)
