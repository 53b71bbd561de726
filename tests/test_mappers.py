"""Tests for the product mapping functions."""

import sqlite3
from decimal import Decimal

from inventory_api.app.mappers.product import create_to_product, product_to_read, row_to_product
from inventory_api.app.models.product import Product
from inventory_api.app.schemas.product import ProductCreate


class TestProductMappers:
    def test_product_to_read_copies_every_field(self):
        product = Product(id=7, name="Widget", quantity=10, price=Decimal("2.50"), description="Blue")

        read = product_to_read(product)

        assert read.id == 7
        assert read.name == "Widget"
        assert read.quantity == 10
        assert read.price == Decimal("2.50")
        assert read.description == "Blue"

    def test_product_to_read_keeps_missing_description_as_none(self):
        read = product_to_read(Product(id=1, name="Bolt", quantity=0, price=Decimal("0")))
        assert read.description is None

    def test_price_serializes_as_json_number(self):
        read = product_to_read(Product(id=1, name="Widget", quantity=10, price=Decimal("2.50")))
        assert read.model_dump(mode="json")["price"] == 2.5

    def test_create_to_product_leaves_id_unset(self):
        data = ProductCreate(name="Widget", quantity=10, price=Decimal("2.50"))

        product = create_to_product(data)

        assert product.id == 0
        assert (product.name, product.quantity, product.price) == ("Widget", 10, Decimal("2.50"))
        assert product.description is None

    def test_create_request_ignores_client_supplied_id(self):
        data = ProductCreate.model_validate({"id": 99, "name": "Widget", "quantity": 1, "price": 1})
        assert create_to_product(data).id == 0

    def test_row_to_product_parses_decimal_text(self):
        conn = sqlite3.connect(":memory:")
        conn.row_factory = sqlite3.Row
        row = conn.execute(
            "SELECT 3 AS id, 'Nut' AS name, 4 AS quantity, '0.10' AS price, NULL AS description"
        ).fetchone()
        conn.close()

        product = row_to_product(row)

        assert product == Product(id=3, name="Nut", quantity=4, price=Decimal("0.10"))
