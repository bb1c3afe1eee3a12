from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from verifydip.core.types import AssetType, IpAssetStatus
from verifydip.schemas.base import CamelInput, CamelModel


class IpAsset(CamelModel):
    id: int
    ip_id: str
    user_id: Optional[int] = None

    title: str
    description: Optional[str] = None
    asset_type: AssetType
    file_name: str
    file_size: Optional[int] = None
    ipfs_hash: Optional[str] = None
    metadata_hash: Optional[str] = None

    # Cultural provenance
    cultural_origin: Optional[str] = None
    language: Optional[str] = None
    region: Optional[str] = None
    creation_date: Optional[str] = None

    royalty_rate: Decimal = Decimal("5.00")

    # Story Protocol registration
    registration_tx_hash: Optional[str] = None
    license_terms_id: Optional[str] = None
    story_ip_id: Optional[str] = None

    # IDGT reward
    idgt_registered: bool = False
    idgt_reward_amount: Optional[str] = None
    idgt_transaction_hash: Optional[str] = None

    status: IpAssetStatus = IpAssetStatus.pending
    created_at: datetime


class IpAssetCreate(CamelInput):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    asset_type: AssetType
    file_name: str = Field(..., min_length=1)
    file_size: Optional[int] = Field(default=None, ge=0)
    cultural_origin: Optional[str] = None
    language: Optional[str] = None
    region: Optional[str] = None
    creation_date: Optional[str] = None
    royalty_rate: Decimal = Field(default=Decimal("5.00"), ge=0, le=100, max_digits=5, decimal_places=2)


class IpAssetUpdate(CamelInput):
    """
    Shallow-merge patch: only fields explicitly present are applied.
    id, ip_id, user_id and created_at are not updatable.
    """

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    asset_type: Optional[AssetType] = None
    file_name: Optional[str] = Field(default=None, min_length=1)
    file_size: Optional[int] = Field(default=None, ge=0)
    ipfs_hash: Optional[str] = None
    metadata_hash: Optional[str] = None
    cultural_origin: Optional[str] = None
    language: Optional[str] = None
    region: Optional[str] = None
    creation_date: Optional[str] = None
    royalty_rate: Optional[Decimal] = Field(default=None, ge=0, le=100, max_digits=5, decimal_places=2)
    registration_tx_hash: Optional[str] = None
    license_terms_id: Optional[str] = None
    story_ip_id: Optional[str] = None
    idgt_registered: Optional[bool] = None
    idgt_reward_amount: Optional[str] = None
    idgt_transaction_hash: Optional[str] = None
    status: Optional[IpAssetStatus] = None

    @field_validator(
        "title", "asset_type", "file_name", "royalty_rate", "idgt_registered", "status"
    )
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v
