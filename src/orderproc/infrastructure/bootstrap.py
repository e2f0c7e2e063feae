"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from orderproc.application.process_order import ProcessOrderHandler
from orderproc.domain.service.product_rule_engine import ProductRuleEngine
from orderproc.infrastructure.config import Settings, get_settings
from orderproc.infrastructure.notifications.logging_notification_service import (
    LoggingNotificationService,
)
from orderproc.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orderproc.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or get_settings()
    return JsonProductRepository(settings.products_file)


def order_repository(settings: Settings | None = None) -> JsonOrderRepository:
    settings = settings or get_settings()
    return JsonOrderRepository(settings.orders_file, product_repository(settings))


def process_order_handler(settings: Settings | None = None) -> ProcessOrderHandler:
    settings = settings or get_settings()
    engine = ProductRuleEngine(
        product_repo=product_repository(settings),
        notifications=LoggingNotificationService(),
    )
    return ProcessOrderHandler(order_repo=order_repository(settings), rule_engine=engine)
