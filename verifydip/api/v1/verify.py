from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from verifydip.core.deps import get_storage
from verifydip.schemas.verify import VerificationResponse
from verifydip.storage.base import Storage

router = APIRouter(prefix="/verify")


@router.get("/{ip_id}", response_model=VerificationResponse)
async def verify_ip(ip_id: str, storage: Storage = Depends(get_storage)):
    asset = storage.get_ip_asset_by_ip_id(ip_id)
    if not asset:
        raise HTTPException(
            status_code=404, detail={"message": "IP asset not found", "verified": False}
        )

    owner = storage.get_user(asset.user_id) if asset.user_id is not None else None
    derivatives = storage.get_derivative_works_by_parent_id(asset.ip_id)

    return VerificationResponse(
        verified=True,
        asset=asset,
        owner=owner,
        derivatives=len(derivatives),
    )
