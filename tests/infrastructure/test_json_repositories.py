"""Tests for the JSON-file repositories."""

import json
from datetime import datetime, timezone

import pytest

from orderproc.domain.exceptions import PersistenceError
from orderproc.domain.model.order import Order
from orderproc.domain.model.product import Product, ProductType
from orderproc.infrastructure.persistence.json_order_repository import JsonOrderRepository
from orderproc.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

SEASON_START = datetime(2026, 6, 1, tzinfo=timezone.utc)
SEASON_END = datetime(2026, 8, 31, tzinfo=timezone.utc)


@pytest.fixture
def product_repo(tmp_path):
    return JsonProductRepository(tmp_path / "products.json")


def _watermelon() -> Product:
    return Product(
        id="1", name="Watermelon", type=ProductType.SEASONAL,
        available=30, lead_time=15,
        season_start_date=SEASON_START, season_end_date=SEASON_END,
    )


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert json.loads(path.read_text()) == []

    def test_save_and_reload_full_record(self, product_repo):
        product_repo.save(_watermelon())
        assert product_repo.get_by_id("1") == _watermelon()

    def test_get_by_name_is_case_insensitive(self, product_repo):
        product_repo.save(_watermelon())
        assert product_repo.get_by_name("WATERMELON").id == "1"
        assert product_repo.get_by_name("Grapes") is None

    def test_update_available_touches_only_stock(self, product_repo, tmp_path):
        product_repo.save(_watermelon())
        product_repo.update_available("1", 7)

        raw = json.loads((tmp_path / "products.json").read_text())
        assert raw[0]["available"] == 7
        assert raw[0]["season_end_date"] == SEASON_END.isoformat()
        assert product_repo.get_by_id("1").available == 7

    def test_update_unknown_product_fails(self, product_repo):
        with pytest.raises(PersistenceError, match="unknown product '9'"):
            product_repo.update_available("9", 1)

    def test_unknown_type_and_naive_dates_are_normalised(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps([{
            "id": "1", "name": "Mystery", "type": "GADGET",
            "available": 2, "lead_time": 0,
            "expiry_date": "2026-01-01T00:00:00",
        }]))

        product = JsonProductRepository(path).get_by_id("1")

        assert product.type == ProductType.NORMAL
        assert product.expiry_date == datetime(2026, 1, 1, tzinfo=timezone.utc)

    def test_corrupt_file_raises_persistence_error(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json")
        with pytest.raises(PersistenceError, match="Cannot read"):
            JsonProductRepository(path).list_all()


class TestJsonOrderRepository:

    def test_save_assigns_ids(self, tmp_path, product_repo):
        repo = JsonOrderRepository(tmp_path / "orders.json", product_repo)
        first, second = Order.create([]), Order.create([])
        repo.save(first)
        repo.save(second)
        assert (first.id, second.id) == (1, 2)
        assert repo.next_id() == 3

    def test_products_are_resolved_on_load(self, tmp_path, product_repo):
        product_repo.save(_watermelon())
        repo = JsonOrderRepository(tmp_path / "orders.json", product_repo)
        order = Order.create([_watermelon()])
        repo.save(order)

        product_repo.update_available("1", 3)
        loaded = repo.get_with_products(order.id)

        assert [p.available for p in loaded.products] == [3]

    def test_missing_products_are_skipped(self, tmp_path, product_repo):
        repo = JsonOrderRepository(tmp_path / "orders.json", product_repo)
        order = Order.create([_watermelon()])
        repo.save(order)

        assert repo.get_with_products(order.id).products == []

    def test_unknown_order_is_none(self, tmp_path, product_repo):
        repo = JsonOrderRepository(tmp_path / "orders.json", product_repo)
        assert repo.get_with_products(5) is None
