"""Product aggregate.

Products live independently of orders. Each product belongs to a category
that decides how an order line is fulfilled: normal stock, a seasonal
window, or an expiry date.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from orderproc.domain.exceptions import ValidationError


class ProductType(Enum):
    NORMAL = "NORMAL"
    SEASONAL = "SEASONAL"
    EXPIRABLE = "EXPIRABLE"

    @staticmethod
    def parse(raw: str | None) -> ProductType:
        """Resolve a stored category; unknown or missing values are NORMAL."""
        if raw is None:
            return ProductType.NORMAL
        try:
            return ProductType(raw.strip().upper())
        except ValueError:
            return ProductType.NORMAL


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Immutable: rules return a new Product for every state change and the
    rule engine persists it.

    Invariants:
    - ``available`` is always >= 0
    - ``lead_time`` (days) is always >= 0
    """

    id: str
    name: str
    type: ProductType = ProductType.NORMAL
    available: int = 0
    lead_time: int = 0
    expiry_date: datetime | None = None
    season_start_date: datetime | None = None
    season_end_date: datetime | None = None

    def __post_init__(self) -> None:
        if self.available < 0:
            raise ValidationError(
                f"Available stock cannot be negative, got {self.available}"
            )
        if self.lead_time < 0:
            raise ValidationError(
                f"Lead time cannot be negative, got {self.lead_time}"
            )

    def decremented(self) -> Product:
        """Return a copy with one unit taken out of stock."""
        if self.available <= 0:
            raise ValidationError(f"{self.name} has no stock to decrement")
        return replace(self, available=self.available - 1)

    def with_available(self, available: int) -> Product:
        return replace(self, available=available)
