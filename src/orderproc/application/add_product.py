"""Application service: Add Product use case."""

from __future__ import annotations

from datetime import datetime

from orderproc.domain.exceptions import ValidationError
from orderproc.domain.model.product import Product, ProductType
from orderproc.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        product_type: ProductType,
        available: int,
        lead_time: int,
        expiry_date: datetime | None = None,
        season_start_date: datetime | None = None,
        season_end_date: datetime | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        if (
            season_start_date is not None
            and season_end_date is not None
            and season_end_date <= season_start_date
        ):
            raise ValidationError("Season end date must be after its start date")

        # Auto-assign ID based on existing numeric IDs
        numeric_ids = [int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        product = Product(
            id=next_id,
            name=name.strip(),
            type=product_type,
            available=available,
            lead_time=lead_time,
            expiry_date=expiry_date,
            season_start_date=season_start_date,
            season_end_date=season_end_date,
        )
        self._product_repo.save(product)
        return product
