#verifydip/services/royalty_service.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Optional

from verifydip.core.types import RoyaltyStatus
from verifydip.schemas.royalties import RoyaltyPayment, RoyaltyPaymentUpdate, RoyaltySummary
from verifydip.storage.base import Storage

logger = logging.getLogger(__name__)


def _total(payments: Iterable[RoyaltyPayment], status: RoyaltyStatus) -> Decimal:
    return sum((p.amount for p in payments if p.status == status.value), Decimal("0"))


class RoyaltyService:
    """
    Royalty aggregates are computed here from the store's list operations;
    the store itself never sums anything.
    """

    def summary_for_user(self, storage: Storage, user_id: int) -> RoyaltySummary:
        payments = storage.get_royalty_payments_by_user_id(user_id)
        return RoyaltySummary(
            payments=payments,
            total_earned=_total(payments, RoyaltyStatus.claimed),
            available_to_claim=_total(payments, RoyaltyStatus.pending),
        )

    def claim(self, storage: Storage, payment_id: int, tx_hash: str) -> Optional[RoyaltyPayment]:
        claimed = storage.update_royalty_payment(
            payment_id,
            RoyaltyPaymentUpdate(status=RoyaltyStatus.claimed, tx_hash=tx_hash),
        )
        if claimed:
            logger.info("royalty claimed", extra={"payment_id": payment_id, "tx_hash": tx_hash})
        return claimed
