"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from orderproc.domain.model.order import Order
from orderproc.domain.model.product import Product


@dataclass(frozen=True)
class ProcessOrderResult:
    """Output of processing: only the order identifier is reported."""

    order_id: int


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    type: str
    available: int
    lead_time: int
    expiry_date: str | None
    season_start_date: str | None
    season_end_date: str | None

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            type=product.type.value,
            available=product.available,
            lead_time=product.lead_time,
            expiry_date=_fmt(product.expiry_date),
            season_start_date=_fmt(product.season_start_date),
            season_end_date=_fmt(product.season_end_date),
        )


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    products: list[ProductDTO]
    created_at: str

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            products=[ProductDTO.from_domain(p) for p in order.products],
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


def _fmt(value: datetime | None) -> str | None:
    return value.strftime("%Y-%m-%d") if value is not None else None
