from __future__ import annotations

from typing import Optional

from pydantic import Field

from verifydip.schemas.base import CamelInput, CamelModel


class IdgtResult(CamelModel):
    """Outcome of one IDGT service call; `detail` carries the formatted amount."""

    success: bool
    transaction_hash: Optional[str] = None
    detail: Optional[str] = None
    error: Optional[str] = None


class IdgtRegisterRequest(CamelInput):
    ip_asset_id: int
    owner_address: str = Field(..., min_length=1)
    ip_id: str = Field(..., min_length=1)


class IdgtRegisterResponse(CamelModel):
    success: bool
    message: str
    transaction_hash: Optional[str] = None
    tokens_awarded: Optional[str] = None


class PayRoyaltyRequest(CamelInput):
    ip_id: str = Field(..., min_length=1)
    amount: str = Field(..., min_length=1)  # wei, integer string
    payer_address: str = Field(..., min_length=1)


class PayRoyaltyResponse(CamelModel):
    success: bool
    message: Optional[str] = None
    transaction_hash: Optional[str] = None
    amount_paid: Optional[str] = None


class UsageFeeRequest(CamelInput):
    ip_id: str = Field(..., min_length=1)
    eth_amount: str = Field(..., min_length=1)  # wei, integer string
    user_address: str = Field(..., min_length=1)


class UsageFeeResponse(CamelModel):
    success: bool
    message: Optional[str] = None
    transaction_hash: Optional[str] = None
    fee_amount: Optional[str] = None


class TokenInfo(CamelModel):
    balance: str
    royalties: str
    balance_formatted: str
    royalties_formatted: str


class IdgtStats(CamelModel):
    total_supply: str
    total_holders: int
    total_royalties_paid: str
    total_ips_registered: int


class AgentRequest(CamelInput):
    prompt: str = Field(..., min_length=1)


class AgentResponse(CamelModel):
    response: str
