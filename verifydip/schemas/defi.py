from __future__ import annotations

from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import ConfigDict, Field

from verifydip.schemas.base import CamelInput, CamelModel

# token amounts: 18 decimals like the on-chain tokens, at most 12 integer digits
TokenAmount = Annotated[Decimal, Field(gt=0, max_digits=30, decimal_places=18)]


# -----------------------
# Liquid staking
# -----------------------


class StakingPosition(CamelModel):
    staked_amount: Decimal
    lst_balance: Decimal
    rewards: Decimal
    exchange_rate: Decimal
    unstake_requests: List[dict] = Field(default_factory=list)
    total_value_locked: Decimal


class StakeRequest(CamelInput):
    amount: TokenAmount
    user_address: str = Field(..., min_length=1)


class StakeResponse(CamelModel):
    success: bool = True
    transaction_hash: str
    lst_minted: Decimal
    message: str


class UnstakeResponse(CamelModel):
    success: bool = True
    transaction_hash: str
    unlock_time: int  # epoch milliseconds
    message: str


# -----------------------
# Pattern IP registry
# -----------------------


class PatternToken(CamelModel):
    token_id: int
    pattern_name: str
    cultural_origin: str
    artisan_name: str
    is_verified: bool
    royalty_percentage: int
    registration_date: str


class IpRegistrySummary(CamelModel):
    owned_tokens: List[PatternToken]
    total_registered: int
    verified_count: int


class PatternMetadata(CamelModel):
    cultural_origin: str
    artisan_name: Optional[str] = None
    pattern_name: str
    technique: Optional[str] = None
    materials: Optional[str] = None
    region: Optional[str] = None
    tribe: Optional[str] = None
    royalty_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100)


class PatternRegisterRequest(PatternMetadata):
    model_config = ConfigDict(extra="forbid")

    cultural_origin: str = Field(..., min_length=1)
    pattern_name: str = Field(..., min_length=1)
    owner_address: str = Field(..., min_length=1)


class PatternRegisterResponse(CamelModel):
    success: bool = True
    transaction_hash: str
    token_id: int
    message: str
    metadata: PatternMetadata


# -----------------------
# Stablecoin borrowing
# -----------------------


class LoanPosition(CamelModel):
    has_position: bool
    collateral_amount: Decimal
    borrowed_amount: Decimal
    accrued_interest: Decimal
    health_factor: int
    utilization_ratio: int
    collateral_value: Decimal
    borrowing_capacity: Decimal
    liquidation_threshold: Decimal
    interest_rate: Decimal


class BorrowRequest(CamelInput):
    collateral_amount: TokenAmount
    borrow_amount: TokenAmount
    user_address: str = Field(..., min_length=1)


class BorrowResponse(CamelModel):
    success: bool = True
    transaction_hash: str
    collateral_deposited: Decimal
    stablecoin_minted: Decimal
    health_factor: Decimal
    message: str


class RepayRequest(CamelInput):
    amount: TokenAmount
    user_address: str = Field(..., min_length=1)


class RepayResponse(CamelModel):
    success: bool = True
    transaction_hash: str
    total_repaid: Decimal
    principal_paid: Decimal
    interest_paid: Decimal
    message: str


class DefiStats(CamelModel):
    total_value_locked: str
    total_staked: str
    total_borrowed: str
    average_health_factor: int
    registered_patterns: int
    verified_patterns: int
    active_borrowers: int
    liquidation_events: int
