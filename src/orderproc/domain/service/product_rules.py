"""Domain service: per-category product rules.

Each rule is pure: given a product and the current time it returns a
RuleDecision describing the new product state, how it must be stored and
which notification it implies. Nothing here touches a repository, a
notification channel or the system clock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from orderproc.domain.model.outcome import PersistMode, ProcessingOutcome, RuleDecision
from orderproc.domain.model.product import Product, ProductType


def is_in_season(product: Product, now: datetime) -> bool:
    """True iff both season bounds are set and ``now`` lies strictly between them."""
    if product.season_start_date is None or product.season_end_date is None:
        return False
    return product.season_start_date < now < product.season_end_date


def decrement_stock(product: Product) -> RuleDecision:
    return RuleDecision(
        product.decremented(), ProcessingOutcome.STOCK_DECREMENTED, PersistMode.PARTIAL
    )


def notify_delay(product: Product) -> RuleDecision:
    """Back-order the product for its current lead time.

    The full record is stored, the lead time is restated unchanged.
    """
    return RuleDecision(product, ProcessingOutcome.DELAY_NOTIFIED, PersistMode.FULL)


class ProductRule(ABC):

    @abstractmethod
    def decide(self, product: Product, now: datetime) -> RuleDecision:
        """Decide the single outcome for one order line of ``product``."""


class NormalProductRule(ProductRule):

    def decide(self, product: Product, now: datetime) -> RuleDecision:
        if product.available > 0:
            return decrement_stock(product)
        if product.lead_time > 0:
            return notify_delay(product)
        return RuleDecision.no_op(product)


class SeasonalProductRule(ProductRule):

    def decide(self, product: Product, now: datetime) -> RuleDecision:
        if is_in_season(product, now) and product.available > 0:
            return decrement_stock(product)
        return self.handle_unavailable(product, now)

    @staticmethod
    def handle_unavailable(product: Product, now: datetime) -> RuleDecision:
        """Out of season, or in season but out of stock.

        A product with a missing season bound can never be restocked within
        its season, so it is handled like a late arrival.
        """
        start, end = product.season_start_date, product.season_end_date
        if start is None or end is None or now + timedelta(days=product.lead_time) > end:
            return RuleDecision(
                product.with_available(0),
                ProcessingOutcome.OUT_OF_STOCK_NOTIFIED,
                PersistMode.FULL,
            )
        if start > now:
            return RuleDecision(
                product, ProcessingOutcome.OUT_OF_STOCK_NOTIFIED, PersistMode.FULL
            )
        return notify_delay(product)


class ExpirableProductRule(ProductRule):

    def decide(self, product: Product, now: datetime) -> RuleDecision:
        if product.available <= 0:
            return self.handle_expired(product, now)
        if product.expiry_date is None or product.expiry_date <= now:
            return self.handle_expired(product, now)
        return decrement_stock(product)

    @staticmethod
    def handle_expired(product: Product, now: datetime) -> RuleDecision:
        if (
            product.available > 0
            and product.expiry_date is not None
            and product.expiry_date > now
        ):
            return decrement_stock(product)
        return RuleDecision(
            product.with_available(0),
            ProcessingOutcome.EXPIRATION_NOTIFIED,
            PersistMode.FULL,
        )


_NORMAL_RULE = NormalProductRule()

RULES: dict[ProductType, ProductRule] = {
    ProductType.NORMAL: _NORMAL_RULE,
    ProductType.SEASONAL: SeasonalProductRule(),
    ProductType.EXPIRABLE: ExpirableProductRule(),
}


def rule_for(product_type: ProductType | None) -> ProductRule:
    """Return the rule for a category, falling back to the NORMAL rule."""
    if product_type is None:
        return _NORMAL_RULE
    return RULES.get(product_type, _NORMAL_RULE)
