from __future__ import annotations

from decimal import Decimal
from typing import Annotated, List

from pydantic import Field, model_validator

from verifydip.schemas.base import CamelInput, CamelModel

NonEmptyStr = Annotated[str, Field(min_length=1)]


class StoryRegisterRequest(CamelInput):
    ip_asset_id: int
    parent_ip_ids: List[NonEmptyStr] = Field(default_factory=list)
    license_terms_ids: List[NonEmptyStr] = Field(default_factory=list)

    @model_validator(mode="after")
    def parents_need_terms(self):
        if self.parent_ip_ids and not self.license_terms_ids:
            raise ValueError("licenseTermsIds is required when parentIpIds is given")
        return self


class StoryRegisterResponse(CamelModel):
    ip_id: str  # on-chain IP account, stored as IpAsset.story_ip_id
    tx_hash: str
    derivatives_registered: int = 0
    success: bool = True


class ClaimRevenueRequest(CamelInput):
    ancestor_ip_id: str = Field(..., min_length=1)
    claimer: str = Field(..., min_length=1)
    child_ip_ids: List[str] = Field(default_factory=list)
    royalty_policies: List[str] = Field(default_factory=list)
    currency_tokens: List[str] = Field(default_factory=list)


class ClaimRevenueResponse(CamelModel):
    tx_hash: str
    claimed_amount: Decimal
    currency: str = "WIP"
    success: bool = True
