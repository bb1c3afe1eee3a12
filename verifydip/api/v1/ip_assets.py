# verifydip/api/v1/ip_assets.py
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pydantic import ValidationError

from verifydip.core.deps import get_storage, get_upload_service
from verifydip.core.errors import error_list
from verifydip.schemas.ip_assets import IpAsset, IpAssetCreate, IpAssetUpdate
from verifydip.services.upload_service import UploadRejected, UploadService
from verifydip.storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ip-assets")


@router.post("", response_model=IpAsset)
def create_ip_asset(
    file: Optional[UploadFile] = File(None),
    user_id: Optional[int] = Form(None, alias="userId"),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    asset_type: Optional[str] = Form(None, alias="assetType"),
    cultural_origin: Optional[str] = Form(None, alias="culturalOrigin"),
    language: Optional[str] = Form(None),
    region: Optional[str] = Form(None),
    creation_date: Optional[str] = Form(None, alias="creationDate"),
    royalty_rate: Optional[str] = Form(None, alias="royaltyRate"),
    storage: Storage = Depends(get_storage),
    uploads: UploadService = Depends(get_upload_service),
):
    if file is None:
        raise HTTPException(status_code=400, detail="File is required")
    if user_id is None:
        raise HTTPException(status_code=400, detail="User ID is required")

    try:
        stored = uploads.save(file)
    except UploadRejected as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc))

    fields = {
        "title": title,
        "description": description,
        "asset_type": asset_type,
        "cultural_origin": cultural_origin,
        "language": language,
        "region": region,
        "creation_date": creation_date,
        "royalty_rate": royalty_rate,
    }
    try:
        data = IpAssetCreate(
            **{k: v for k, v in fields.items() if v is not None},
            file_name=stored.file_name,
            file_size=stored.size,
        )
    except ValidationError as exc:
        stored.path.unlink(missing_ok=True)
        raise HTTPException(
            status_code=400,
            detail={"message": "Invalid IP asset data", "errors": error_list(exc.errors())},
        )

    asset = storage.create_ip_asset(data, user_id=user_id)
    logger.info("ip asset created", extra={"ip_asset_id": asset.id, "ip_id": asset.ip_id, "user_id": user_id})
    return asset


@router.get("/user/{user_id}", response_model=List[IpAsset])
async def list_user_ip_assets(user_id: int, storage: Storage = Depends(get_storage)):
    return storage.get_ip_assets_by_user_id(user_id)


@router.get("/{asset_id}", response_model=IpAsset)
async def get_ip_asset(asset_id: int, storage: Storage = Depends(get_storage)):
    asset = storage.get_ip_asset(asset_id)
    if not asset:
        raise HTTPException(status_code=404, detail="IP asset not found")
    return asset


@router.patch("/{asset_id}", response_model=IpAsset)
async def update_ip_asset(asset_id: int, body: IpAssetUpdate, storage: Storage = Depends(get_storage)):
    updated = storage.update_ip_asset(asset_id, body)
    if not updated:
        raise HTTPException(status_code=404, detail="IP asset not found")
    return updated
