"""Application service: Process Order use case.

Loads an order with its products and runs every product through the
rule engine, one at a time. Products are independent, so a failure on
one product leaves earlier products' writes in place and aborts the rest.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

import structlog

from orderproc.application.dto import ProcessOrderResult
from orderproc.domain.exceptions import OrderNotFoundError
from orderproc.domain.repository.order_repository import OrderRepository
from orderproc.domain.service.product_rule_engine import ProductRuleEngine

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProcessOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        rule_engine: ProductRuleEngine,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._rule_engine = rule_engine
        self._clock = clock

    def handle(self, order_id: int) -> ProcessOrderResult:
        order = self._order_repo.get_with_products(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        log = logger.bind(order_id=order_id)

        if not order.products:
            log.info("order.processing_skipped", reason="no products")
            return ProcessOrderResult(order_id=order_id)

        # One timestamp for the whole order keeps every rule consistent
        now = self._clock()
        log.info("order.processing_started", product_count=len(order.products))

        for product in order.products:
            self._rule_engine.process(product, now)

        log.info("order.processing_completed")
        return ProcessOrderResult(order_id=order_id)
