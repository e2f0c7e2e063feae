"""NotificationService adapter that emits structured log events."""

from __future__ import annotations

from datetime import datetime

import structlog

from orderproc.domain.model.product import Product
from orderproc.domain.notifications import NotificationService

logger = structlog.get_logger(__name__)


class LoggingNotificationService(NotificationService):

    def notify_delay(self, lead_time: int, product: Product) -> None:
        logger.warning(
            "notification.delay",
            product_id=product.id,
            product_name=product.name,
            lead_time_days=lead_time,
        )

    def notify_out_of_stock(self, product_name: str) -> None:
        logger.warning("notification.out_of_stock", product_name=product_name)

    def notify_expiration(self, product_name: str, expiry_date: datetime | None) -> None:
        logger.warning(
            "notification.expiration",
            product_name=product_name,
            expiry_date=expiry_date.isoformat() if expiry_date else None,
        )
