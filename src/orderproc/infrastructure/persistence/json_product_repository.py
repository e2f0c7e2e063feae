"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from orderproc.domain.exceptions import PersistenceError
from orderproc.domain.model.product import Product, ProductType
from orderproc.domain.repository.product_repository import ProductRepository


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    def update_available(self, product_id: str, available: int) -> None:
        records = self._load_raw()
        for raw in records:
            if raw["id"] == product_id:
                raw["available"] = available
                break
        else:
            raise PersistenceError(f"Cannot update stock of unknown product '{product_id}'")
        self._persist_raw(records)

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_raw(p: Product) -> dict:
        return {
            "id": p.id,
            "name": p.name,
            "type": p.type.value,
            "available": p.available,
            "lead_time": p.lead_time,
            "expiry_date": _dump_date(p.expiry_date),
            "season_start_date": _dump_date(p.season_start_date),
            "season_end_date": _dump_date(p.season_end_date),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            type=ProductType.parse(raw.get("type")),
            available=raw.get("available", 0),
            lead_time=raw.get("lead_time", 0),
            expiry_date=_load_date(raw.get("expiry_date")),
            season_start_date=_load_date(raw.get("season_start_date")),
            season_end_date=_load_date(raw.get("season_end_date")),
        )

    def _load(self) -> dict[str, Product]:
        return {raw["id"]: self._to_domain(raw) for raw in self._load_raw()}

    def _persist(self, products: dict[str, Product]) -> None:
        self._persist_raw([self._to_raw(p) for p in products.values()])

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _dump_date(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _load_date(raw: str | None) -> datetime | None:
    if raw is None:
        return None
    return as_utc(datetime.fromisoformat(raw))
