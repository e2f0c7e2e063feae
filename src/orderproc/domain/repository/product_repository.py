"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

This is also the stock repository used by the rule engine: ``save``
writes the full record, ``update_available`` writes only the stock count.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderproc.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product (every field)."""

    @abstractmethod
    def update_available(self, product_id: str, available: int) -> None:
        """Persist only the available stock of an existing product."""
