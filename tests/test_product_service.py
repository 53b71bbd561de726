"""Tests for ProductService."""

import asyncio
from decimal import Decimal

import pytest

from inventory_api.app.core.config import settings
from inventory_api.app.core.exceptions import ProductNotFoundError, ProductValidationError
from inventory_api.app.schemas.product import ProductCreate, ProductUpdate
from inventory_api.app.services.product_service import ProductService


def run(coro):
    return asyncio.run(coro)


def widget(**overrides):
    fields = {"name": "Widget", "quantity": 10, "price": Decimal("2.50")}
    fields.update(overrides)
    return fields


class TestProductService:
    def test_list_on_empty_store(self, database):
        assert run(ProductService.list_products()) == []

    def test_create_then_get_returns_same_fields(self, database):
        created = run(ProductService.create_product(ProductCreate(**widget(description="Blue"))))

        fetched = run(ProductService.get_product(created.id))

        assert fetched == created
        assert (fetched.name, fetched.quantity, fetched.price) == ("Widget", 10, Decimal("2.50"))
        assert fetched.description == "Blue"

    def test_created_ids_are_unique(self, database):
        ids = {run(ProductService.create_product(ProductCreate(**widget()))).id for _ in range(5)}
        assert len(ids) == 5

    @pytest.mark.parametrize("operation", ["get", "update", "delete"])
    def test_unknown_id_is_not_found(self, database, operation):
        calls = {
            "get": lambda: ProductService.get_product(999),
            "update": lambda: ProductService.update_product(999, ProductUpdate(**widget())),
            "delete": lambda: ProductService.delete_product(999),
        }
        with pytest.raises(ProductNotFoundError) as excinfo:
            run(calls[operation]())
        assert excinfo.value.product_id == 999

    def test_update_overwrites_fields_and_keeps_id(self, database):
        created = run(ProductService.create_product(ProductCreate(**widget(description="Blue"))))

        updated = run(
            ProductService.update_product(
                created.id, ProductUpdate(name="Gadget", quantity=5, price=Decimal("3.10"))
            )
        )
        fetched = run(ProductService.get_product(created.id))

        assert updated.id == created.id
        assert fetched == updated
        assert (fetched.name, fetched.quantity, fetched.price) == ("Gadget", 5, Decimal("3.10"))
        # Whole-record overwrite: an omitted description is cleared.
        assert fetched.description is None

    def test_update_is_idempotent(self, database):
        created = run(ProductService.create_product(ProductCreate(**widget())))
        body = ProductUpdate(**widget(quantity=5))

        once = run(ProductService.update_product(created.id, body))
        twice = run(ProductService.update_product(created.id, body))

        assert once == twice
        assert run(ProductService.list_products()) == [twice]

    def test_delete_then_get_is_not_found(self, database):
        created = run(ProductService.create_product(ProductCreate(**widget())))

        run(ProductService.delete_product(created.id))

        with pytest.raises(ProductNotFoundError):
            run(ProductService.get_product(created.id))
        with pytest.raises(ProductNotFoundError):
            run(ProductService.delete_product(created.id))

    def test_list_counts_creates_minus_deletes(self, database):
        created = [run(ProductService.create_product(ProductCreate(**widget(name=f"p{i}")))) for i in range(5)]
        for product in created[:2]:
            run(ProductService.delete_product(product.id))

        remaining = run(ProductService.list_products())

        assert [p.id for p in remaining] == [p.id for p in created[2:]]


class TestProductValidation:
    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"name": ""}, "name"),
            ({"name": "   "}, "name"),
            ({"quantity": -1}, "quantity"),
            ({"price": Decimal("-0.01")}, "price"),
        ],
    )
    def test_create_rejects_broken_rules(self, database, overrides, field):
        with pytest.raises(ProductValidationError) as excinfo:
            run(ProductService.create_product(ProductCreate(**widget(**overrides))))

        assert [issue["field"] for issue in excinfo.value.issues] == [field]
        assert run(ProductService.list_products()) == []

    def test_all_issues_are_reported_together(self, database):
        with pytest.raises(ProductValidationError) as excinfo:
            run(ProductService.create_product(ProductCreate(name="", quantity=-1, price=Decimal("-1"))))
        assert {issue["field"] for issue in excinfo.value.issues} == {"name", "quantity", "price"}

    def test_update_rejects_broken_rules_without_writing(self, database):
        created = run(ProductService.create_product(ProductCreate(**widget())))

        with pytest.raises(ProductValidationError):
            run(ProductService.update_product(created.id, ProductUpdate(**widget(quantity=-5))))

        assert run(ProductService.get_product(created.id)).quantity == 10

    def test_rules_can_be_disabled(self, database, monkeypatch):
        monkeypatch.setattr(settings, "enforce_product_rules", False)

        created = run(ProductService.create_product(ProductCreate(name="", quantity=-3, price=Decimal("-1"))))

        assert created.quantity == -3
        assert created.price == Decimal("-1")

    def test_update_of_missing_product_is_not_found_even_with_invalid_body(self, database):
        with pytest.raises(ProductNotFoundError):
            run(ProductService.update_product(999, ProductUpdate(**widget(name="", quantity=-1))))
