"""Domain service: apply product rules.

Chooses the rule for a product's category, stores the decided state in
the stock repository and sends the matching notification.

Repository failures propagate to the caller. Notifications are
best-effort: a failing notification channel is logged and never undoes
or blocks a stock change.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from orderproc.domain.model.outcome import PersistMode, ProcessingOutcome, RuleDecision
from orderproc.domain.model.product import Product
from orderproc.domain.notifications import NotificationService
from orderproc.domain.repository.product_repository import ProductRepository
from orderproc.domain.service.product_rules import rule_for

logger = structlog.get_logger(__name__)


class ProductRuleEngine:

    def __init__(
        self,
        product_repo: ProductRepository,
        notifications: NotificationService,
    ) -> None:
        self._product_repo = product_repo
        self._notifications = notifications

    def process(self, product: Product, now: datetime) -> RuleDecision:
        """Apply exactly one outcome to ``product`` as of ``now``."""
        decision = rule_for(product.type).decide(product, now)

        self._persist(decision)
        self._notify(decision)

        logger.info(
            "product.rule_applied",
            product_id=product.id,
            product_type=product.type.value,
            outcome=decision.outcome.value,
            available=decision.product.available,
        )
        return decision

    def _persist(self, decision: RuleDecision) -> None:
        product = decision.product
        if decision.persist is PersistMode.PARTIAL:
            self._product_repo.update_available(product.id, product.available)
        elif decision.persist is PersistMode.FULL:
            self._product_repo.save(product)

    def _notify(self, decision: RuleDecision) -> None:
        product = decision.product
        try:
            if decision.outcome is ProcessingOutcome.DELAY_NOTIFIED:
                self._notifications.notify_delay(product.lead_time, product)
            elif decision.outcome is ProcessingOutcome.OUT_OF_STOCK_NOTIFIED:
                self._notifications.notify_out_of_stock(product.name)
            elif decision.outcome is ProcessingOutcome.EXPIRATION_NOTIFIED:
                self._notifications.notify_expiration(product.name, product.expiry_date)
        except Exception:
            logger.warning(
                "notification.failed",
                product_id=product.id,
                outcome=decision.outcome.value,
                exc_info=True,
            )
