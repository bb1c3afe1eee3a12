from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator

from verifydip.core.types import RoyaltyStatus
from verifydip.schemas.base import CamelInput, CamelModel


class RoyaltyPayment(CamelModel):
    id: int
    ip_asset_id: Optional[int] = None
    amount: Decimal
    currency: str = "WIP"
    claimer_address: str
    tx_hash: Optional[str] = None
    status: RoyaltyStatus = RoyaltyStatus.pending
    created_at: datetime


class RoyaltyPaymentCreate(CamelInput):
    ip_asset_id: Optional[int] = None
    amount: Decimal = Field(..., ge=0, max_digits=18, decimal_places=8)
    currency: str = Field(default="WIP", min_length=1)
    claimer_address: str = Field(..., min_length=1)


class RoyaltyPaymentUpdate(CamelInput):
    amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=18, decimal_places=8)
    currency: Optional[str] = Field(default=None, min_length=1)
    claimer_address: Optional[str] = Field(default=None, min_length=1)
    tx_hash: Optional[str] = None
    status: Optional[RoyaltyStatus] = None

    @field_validator("amount", "currency", "claimer_address", "status")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


class RoyaltyClaimRequest(CamelInput):
    tx_hash: str = Field(..., min_length=1)


class RoyaltySummary(CamelModel):
    payments: List[RoyaltyPayment]
    total_earned: Decimal
    available_to_claim: Decimal
