"""JSON-file-backed implementation of OrderRepository.

Orders store product IDs only; products are resolved through the
product repository so an order always sees current stock.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from orderproc.domain.exceptions import PersistenceError
from orderproc.domain.model.order import Order
from orderproc.domain.repository.order_repository import OrderRepository
from orderproc.domain.repository.product_repository import ProductRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, product_repo: ProductRepository) -> None:
        self._file_path = file_path
        self._product_repo = product_repo
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_with_products(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "created_at": order.created_at.isoformat(),
            "product_ids": order.product_ids,
        }

    def _to_domain(self, raw: dict) -> Order:
        products = []
        for product_id in raw.get("product_ids", []):
            product = self._product_repo.get_by_id(product_id)
            # Products removed from the catalog drop out of the order
            if product is not None:
                products.append(product)
        return Order(
            id=raw["id"],
            products=products,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc

    def _persist_raw(self, orders: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(orders, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
