# verifydip/api/v1/defi.py
from __future__ import annotations

from fastapi import APIRouter, HTTPException

from verifydip.schemas.defi import (
    BorrowRequest,
    BorrowResponse,
    DefiStats,
    IpRegistrySummary,
    LoanPosition,
    PatternMetadata,
    PatternRegisterRequest,
    PatternRegisterResponse,
    RepayRequest,
    RepayResponse,
    StakeRequest,
    StakeResponse,
    StakingPosition,
    UnstakeResponse,
)
from verifydip.services.defi_service import BorrowLimitExceeded, DefiService

router = APIRouter(prefix="/defi")


# ------------------------------------------------------------------
# LIQUID STAKING
# ------------------------------------------------------------------
@router.get("/staking/{address}", response_model=StakingPosition)
async def staking_position(address: str):
    return DefiService().staking_position(address)


@router.post("/stake", response_model=StakeResponse)
async def stake(body: StakeRequest):
    return DefiService().stake(body.amount, body.user_address)


@router.post("/unstake", response_model=UnstakeResponse)
async def unstake(body: StakeRequest):
    return DefiService().unstake(body.amount, body.user_address)


# ------------------------------------------------------------------
# PATTERN REGISTRY
# ------------------------------------------------------------------
@router.get("/ip-registry/{address}", response_model=IpRegistrySummary)
async def ip_registry(address: str):
    return DefiService().ip_registry(address)


@router.post("/register-ip", response_model=PatternRegisterResponse)
async def register_pattern(body: PatternRegisterRequest):
    metadata = PatternMetadata(**body.model_dump(exclude={"owner_address"}))
    return DefiService().register_pattern(metadata, body.owner_address)


# ------------------------------------------------------------------
# STABLECOIN BORROWING
# ------------------------------------------------------------------
@router.get("/loan/{address}", response_model=LoanPosition)
async def loan_position(address: str):
    return DefiService().loan_position(address)


@router.post("/borrow", response_model=BorrowResponse)
async def borrow(body: BorrowRequest):
    try:
        return DefiService().borrow(body.collateral_amount, body.borrow_amount, body.user_address)
    except BorrowLimitExceeded as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/repay", response_model=RepayResponse)
async def repay(body: RepayRequest):
    return DefiService().repay(body.amount, body.user_address)


@router.get("/stats", response_model=DefiStats)
async def defi_stats():
    return DefiService().stats()
