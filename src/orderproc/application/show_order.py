"""Application service: Show Order use case (query)."""

from __future__ import annotations

from orderproc.application.dto import OrderDTO
from orderproc.domain.exceptions import OrderNotFoundError
from orderproc.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_with_products(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return OrderDTO.from_domain(order)
