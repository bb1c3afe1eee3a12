# verifydip/api/v1/story.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from verifydip.core.deps import get_storage
from verifydip.schemas.story import (
    ClaimRevenueRequest,
    ClaimRevenueResponse,
    StoryRegisterRequest,
    StoryRegisterResponse,
)
from verifydip.services.story_service import StoryService
from verifydip.storage.base import Storage

router = APIRouter(prefix="/story")


@router.post("/register-ip", response_model=StoryRegisterResponse)
async def register_ip(body: StoryRegisterRequest, storage: Storage = Depends(get_storage)):
    result = StoryService().register_ip(
        storage,
        ip_asset_id=body.ip_asset_id,
        parent_ip_ids=body.parent_ip_ids,
        license_terms_ids=body.license_terms_ids,
    )
    if not result:
        raise HTTPException(status_code=404, detail="IP asset not found")
    return result


@router.post("/claim-revenue", response_model=ClaimRevenueResponse)
async def claim_revenue(body: ClaimRevenueRequest):
    return StoryService().claim_revenue(ancestor_ip_id=body.ancestor_ip_id, claimer=body.claimer)
