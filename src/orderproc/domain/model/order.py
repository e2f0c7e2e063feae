"""Order aggregate.

An order references the products to be fulfilled. Processing never changes
the order itself; only its products' stock moves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from orderproc.domain.model.product import Product


@dataclass
class Order:
    """Aggregate root for customer orders.

    ``products`` holds fully-resolved Product values. Their order is
    irrelevant: each product is processed independently.
    """

    id: int | None
    products: list[Product] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(products: list[Product]) -> Order:
        """Create a new, not yet persisted order."""
        return Order(id=None, products=list(products))

    @property
    def product_ids(self) -> list[str]:
        return [p.id for p in self.products]
