"""Result of applying a product rule.

A RuleDecision is transient: it says which new state a product should be
stored with, how to store it, and which side effect happened.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from orderproc.domain.model.product import Product


class ProcessingOutcome(Enum):
    STOCK_DECREMENTED = "STOCK_DECREMENTED"
    DELAY_NOTIFIED = "DELAY_NOTIFIED"
    OUT_OF_STOCK_NOTIFIED = "OUT_OF_STOCK_NOTIFIED"
    EXPIRATION_NOTIFIED = "EXPIRATION_NOTIFIED"
    NO_OP = "NO_OP"


class PersistMode(Enum):
    NONE = "NONE"
    PARTIAL = "PARTIAL"  # availability only
    FULL = "FULL"  # the whole record


@dataclass(frozen=True)
class RuleDecision:
    product: Product
    outcome: ProcessingOutcome
    persist: PersistMode = PersistMode.NONE

    @staticmethod
    def no_op(product: Product) -> RuleDecision:
        return RuleDecision(product, ProcessingOutcome.NO_OP, PersistMode.NONE)
