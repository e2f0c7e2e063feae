"""Notification port.

One-way signals raised while processing products. How they are delivered
(email, queue, log) is an infrastructure concern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from orderproc.domain.model.product import Product


class NotificationService(ABC):

    @abstractmethod
    def notify_delay(self, lead_time: int, product: Product) -> None:
        """The product is out of stock and will be back in ``lead_time`` days."""

    @abstractmethod
    def notify_out_of_stock(self, product_name: str) -> None:
        """A seasonal product cannot be supplied within its season."""

    @abstractmethod
    def notify_expiration(self, product_name: str, expiry_date: datetime | None) -> None:
        """An expirable product is past its expiry date or has run out."""
