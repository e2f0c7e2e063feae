"""Application service: Create Order use case.

Resolves product IDs to catalog products and stores a new order that
references them. An order without products is allowed; processing it is
a no-op.
"""

from __future__ import annotations

from orderproc.application.dto import OrderDTO
from orderproc.domain.exceptions import EntityNotFoundError, ValidationError
from orderproc.domain.model.order import Order
from orderproc.domain.model.product import Product
from orderproc.domain.repository.order_repository import OrderRepository
from orderproc.domain.repository.product_repository import ProductRepository


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, product_ids: list[str]) -> OrderDTO:
        """Create an order; each product may appear at most once."""
        duplicates = sorted({pid for pid in product_ids if product_ids.count(pid) > 1})
        if duplicates:
            raise ValidationError(
                f"Product IDs listed more than once: {', '.join(duplicates)}"
            )

        products: list[Product] = []

        for product_id in product_ids:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            products.append(product)

        order = Order.create(products)
        self._order_repo.save(order)

        return OrderDTO.from_domain(order)
