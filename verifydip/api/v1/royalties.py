# verifydip/api/v1/royalties.py
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from verifydip.core.deps import get_storage
from verifydip.schemas.royalties import (
    RoyaltyClaimRequest,
    RoyaltyPayment,
    RoyaltyPaymentCreate,
    RoyaltySummary,
)
from verifydip.services.royalty_service import RoyaltyService
from verifydip.storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/royalties")


@router.get("/user/{user_id}", response_model=RoyaltySummary)
async def user_royalties(user_id: int, storage: Storage = Depends(get_storage)):
    return RoyaltyService().summary_for_user(storage, user_id)


@router.get("/ip-asset/{ip_asset_id}", response_model=List[RoyaltyPayment])
async def ip_asset_royalties(ip_asset_id: int, storage: Storage = Depends(get_storage)):
    return storage.get_royalty_payments_by_ip_asset_id(ip_asset_id)


@router.post("", response_model=RoyaltyPayment)
async def create_royalty_payment(body: RoyaltyPaymentCreate, storage: Storage = Depends(get_storage)):
    payment = storage.create_royalty_payment(body)
    logger.info(
        "royalty payment recorded",
        extra={"payment_id": payment.id, "ip_asset_id": payment.ip_asset_id, "amount": str(payment.amount)},
    )
    return payment


@router.patch("/{payment_id}/claim", response_model=RoyaltyPayment)
async def claim_royalty(
    payment_id: int,
    body: RoyaltyClaimRequest,
    storage: Storage = Depends(get_storage),
):
    claimed = RoyaltyService().claim(storage, payment_id, body.tx_hash)
    if not claimed:
        raise HTTPException(status_code=404, detail="Royalty payment not found")
    return claimed
