#verifydip/services/story_service.py
from __future__ import annotations

import logging
import secrets
from decimal import Decimal
from typing import List, Optional

from verifydip.core.hashing import mock_address, mock_tx_hash
from verifydip.core.types import IpAssetStatus
from verifydip.schemas.derivatives import DerivativeWorkCreate
from verifydip.schemas.ip_assets import IpAssetUpdate
from verifydip.schemas.story import ClaimRevenueResponse, StoryRegisterResponse
from verifydip.storage.base import Storage

logger = logging.getLogger(__name__)


class StoryService:
    """
    Simulated Story Protocol flows. No chain is contacted: ids and hashes are
    random hex, claimed amounts are random.
    """

    def register_ip(
        self,
        storage: Storage,
        *,
        ip_asset_id: int,
        parent_ip_ids: List[str],
        license_terms_ids: List[str],
    ) -> Optional[StoryRegisterResponse]:
        asset = storage.get_ip_asset(ip_asset_id)
        if not asset:
            return None

        story_ip_id = mock_address()
        tx_hash = mock_tx_hash()

        changes = {
            "story_ip_id": story_ip_id,
            "registration_tx_hash": tx_hash,
            "status": IpAssetStatus.registered,
        }
        if license_terms_ids:
            changes["license_terms_id"] = license_terms_ids[0]
        storage.update_ip_asset(ip_asset_id, IpAssetUpdate(**changes))

        # each parent gets a derivative link to this asset, paired with its license terms
        for i, parent_ip_id in enumerate(parent_ip_ids):
            terms = license_terms_ids[min(i, len(license_terms_ids) - 1)]
            storage.create_derivative_work(
                DerivativeWorkCreate(
                    parent_ip_id=parent_ip_id,
                    child_ip_id=asset.ip_id,
                    license_terms_id=terms,
                    registration_tx_hash=tx_hash,
                )
            )

        logger.info(
            "ip registered on story",
            extra={
                "ip_asset_id": ip_asset_id,
                "story_ip_id": story_ip_id,
                "parents": len(parent_ip_ids),
            },
        )
        return StoryRegisterResponse(
            ip_id=story_ip_id,
            tx_hash=tx_hash,
            derivatives_registered=len(parent_ip_ids),
        )

    def claim_revenue(self, *, ancestor_ip_id: str, claimer: str) -> ClaimRevenueResponse:
        # random amount in [0, 10) with 2 decimals
        claimed = (Decimal(secrets.randbelow(1000)) / Decimal(100)).quantize(Decimal("0.01"))
        logger.info(
            "revenue claimed",
            extra={"ancestor_ip_id": ancestor_ip_id, "claimer": claimer, "amount": str(claimed)},
        )
        return ClaimRevenueResponse(tx_hash=mock_tx_hash(), claimed_amount=claimed)
