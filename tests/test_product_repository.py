"""Tests for ProductRepository and the connection scope it runs in."""

from decimal import Decimal

import pytest

from inventory_api.app.core.db import connection_scope, get_connection, init_db
from inventory_api.app.models.product import Product
from inventory_api.app.repositories.product_repository import ProductRepository


def _widget(**overrides):
    fields = {"name": "Widget", "quantity": 10, "price": Decimal("2.50")}
    fields.update(overrides)
    return Product(**fields)


class TestProductRepository:
    def test_insert_assigns_unique_ids(self, database):
        with connection_scope() as conn:
            repo = ProductRepository(conn)
            first = repo.insert(_widget())
            second = repo.insert(_widget(name="Gadget"))

        assert first.id > 0
        assert second.id > first.id

    def test_insert_does_not_modify_the_given_entity(self, database):
        product = _widget()
        with connection_scope() as conn:
            stored = ProductRepository(conn).insert(product)
        assert product.id == 0
        assert stored.id != 0

    def test_find_returns_stored_values(self, database):
        with connection_scope() as conn:
            product_id = ProductRepository(conn).insert(_widget(description="Blue")).id

        with connection_scope() as conn:
            found = ProductRepository(conn).find(product_id)

        assert found == Product(
            id=product_id, name="Widget", quantity=10, price=Decimal("2.50"), description="Blue"
        )

    def test_find_missing_returns_none(self, database):
        with connection_scope() as conn:
            assert ProductRepository(conn).find(12345) is None

    def test_scan_all_is_in_id_order(self, database):
        with connection_scope() as conn:
            repo = ProductRepository(conn)
            ids = [repo.insert(_widget(name=name)).id for name in ("b", "a", "c")]
            assert [p.id for p in repo.scan_all()] == ids

    def test_persist_overwrites_fields(self, database):
        with connection_scope() as conn:
            repo = ProductRepository(conn)
            product = repo.insert(_widget())
            product.quantity = 5
            product.price = Decimal("3.00")
            repo.persist(product)
            reloaded = repo.find(product.id)

        assert reloaded.quantity == 5
        assert reloaded.price == Decimal("3.00")

    def test_persist_requires_an_id(self, database):
        with connection_scope() as conn:
            with pytest.raises(ValueError):
                ProductRepository(conn).persist(_widget())

    def test_removed_ids_are_not_reused(self, database):
        with connection_scope() as conn:
            repo = ProductRepository(conn)
            product = repo.insert(_widget())
            repo.remove(product)
            replacement = repo.insert(_widget())

            assert repo.find(product.id) is None
            assert replacement.id > product.id


class TestConnectionScope:
    def test_rolls_back_when_the_block_raises(self, database):
        with pytest.raises(RuntimeError):
            with connection_scope() as conn:
                ProductRepository(conn).insert(_widget())
                raise RuntimeError("boom")

        with connection_scope() as conn:
            assert ProductRepository(conn).scan_all() == []

    def test_init_db_is_repeatable(self, database):
        init_db()
        conn = get_connection()
        try:
            versions = [row["version"] for row in conn.execute("SELECT version FROM migrations")]
        finally:
            conn.close()
        assert versions == [1]
