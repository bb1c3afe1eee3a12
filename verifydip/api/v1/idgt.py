# verifydip/api/v1/idgt.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from verifydip.core.deps import get_idgt_service
from verifydip.schemas.idgt import (
    AgentRequest,
    AgentResponse,
    IdgtRegisterRequest,
    IdgtRegisterResponse,
    IdgtStats,
    PayRoyaltyRequest,
    PayRoyaltyResponse,
    TokenInfo,
    UsageFeeRequest,
    UsageFeeResponse,
)
from verifydip.services.idgt_service import IdgtService

router = APIRouter(prefix="/idgt")


@router.post("/register-ip", response_model=IdgtRegisterResponse)
async def register_ip(body: IdgtRegisterRequest, svc: IdgtService = Depends(get_idgt_service)):
    result = svc.process_ip_registration(body.ip_asset_id, body.owner_address, body.ip_id)
    if result is None:
        raise HTTPException(status_code=404, detail="IP asset not found")
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error or "Failed to register IP")

    return IdgtRegisterResponse(
        success=True,
        message="IP registered successfully and IDGT tokens awarded",
        transaction_hash=result.transaction_hash,
        tokens_awarded=result.detail,
    )


@router.post("/pay-royalty", response_model=PayRoyaltyResponse)
async def pay_royalty(body: PayRoyaltyRequest, svc: IdgtService = Depends(get_idgt_service)):
    result = svc.process_royalty_payment(body.ip_id, body.amount, body.payer_address)
    return PayRoyaltyResponse(
        success=result.success,
        message="Royalty payment processed successfully" if result.success else result.error,
        transaction_hash=result.transaction_hash,
        amount_paid=result.detail,
    )


@router.post("/pay-usage-fee", response_model=UsageFeeResponse)
async def pay_usage_fee(body: UsageFeeRequest, svc: IdgtService = Depends(get_idgt_service)):
    result = svc.process_usage_fee(body.ip_id, body.eth_amount, body.user_address)
    return UsageFeeResponse(
        success=result.success,
        message="Usage fee processed successfully" if result.success else result.error,
        transaction_hash=result.transaction_hash,
        fee_amount=result.detail,
    )


@router.get("/user/{address}", response_model=TokenInfo)
async def user_token_info(address: str, svc: IdgtService = Depends(get_idgt_service)):
    return svc.get_user_token_info(address)


@router.get("/stats", response_model=IdgtStats)
async def idgt_stats(svc: IdgtService = Depends(get_idgt_service)):
    return svc.get_stats()


@router.post("/agent", response_model=AgentResponse)
async def agent_query(body: AgentRequest, svc: IdgtService = Depends(get_idgt_service)):
    return AgentResponse(response=svc.process_agent_query(body.prompt))
