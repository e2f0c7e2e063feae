"""Integration tests for the CreateOrder and ShowOrder use cases."""

import pytest

from orderproc.application.create_order import CreateOrderHandler
from orderproc.application.show_order import ShowOrderHandler
from orderproc.domain.exceptions import (
    EntityNotFoundError,
    OrderNotFoundError,
    ValidationError,
)
from orderproc.domain.model.product import Product, ProductType
from orderproc.infrastructure.persistence.json_order_repository import JsonOrderRepository
from orderproc.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _setup():
    products = [
        Product(id="1", name="USB Cable", available=30, lead_time=15),
        Product(id="2", name="Milk", type=ProductType.EXPIRABLE, available=6),
    ]
    product_repo = FakeProductRepository(products)
    order_repo = FakeOrderRepository(product_repo)
    return order_repo, product_repo


class TestCreateOrder:

    def test_create_assigns_id_and_resolves_products(self):
        order_repo, product_repo = _setup()
        dto = CreateOrderHandler(order_repo, product_repo).handle(["1", "2"])

        assert dto.id == 1
        assert [p.name for p in dto.products] == ["USB Cable", "Milk"]
        assert [p.type for p in dto.products] == ["NORMAL", "EXPIRABLE"]

    def test_ids_are_sequential(self):
        order_repo, product_repo = _setup()
        handler = CreateOrderHandler(order_repo, product_repo)
        first = handler.handle(["1"])
        second = handler.handle(["2"])
        assert (first.id, second.id) == (1, 2)

    def test_empty_order_allowed(self):
        order_repo, product_repo = _setup()
        dto = CreateOrderHandler(order_repo, product_repo).handle([])
        assert dto.products == []

    def test_repeated_product_rejected(self):
        order_repo, product_repo = _setup()
        with pytest.raises(ValidationError, match="more than once: 1"):
            CreateOrderHandler(order_repo, product_repo).handle(["1", "2", "1"])
        assert order_repo.get_with_products(1) is None

    def test_repeated_product_in_json_order_leaves_stock_untouched(self, tmp_path):
        product_repo = JsonProductRepository(tmp_path / "products.json")
        product_repo.save(Product(id="1", name="Cable", available=30))
        order_repo = JsonOrderRepository(tmp_path / "orders.json", product_repo)

        with pytest.raises(ValidationError):
            CreateOrderHandler(order_repo, product_repo).handle(["1", "1"])

        assert order_repo.next_id() == 1
        assert product_repo.get_by_id("1").available == 30

    def test_unknown_product_rejected(self):
        order_repo, product_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="'99' not found"):
            CreateOrderHandler(order_repo, product_repo).handle(["1", "99"])


class TestShowOrder:

    def test_show_reflects_current_stock(self):
        order_repo, product_repo = _setup()
        dto = CreateOrderHandler(order_repo, product_repo).handle(["1"])
        product_repo.update_available("1", 3)

        shown = ShowOrderHandler(order_repo).handle(dto.id)

        assert shown.products[0].available == 3

    def test_show_unknown_order(self):
        order_repo, _ = _setup()
        with pytest.raises(OrderNotFoundError):
            ShowOrderHandler(order_repo).handle(42)
