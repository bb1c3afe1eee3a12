# verifydip/api/v1/users.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from verifydip.core.deps import get_storage
from verifydip.schemas.users import User, UserCreate
from verifydip.storage.base import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users")


@router.post("", response_model=User)
async def create_user(body: UserCreate, storage: Storage = Depends(get_storage)):
    # get-or-create: the store does not reject duplicate wallets, this route does
    existing = storage.get_user_by_wallet_address(body.wallet_address)
    if existing:
        return existing

    user = storage.create_user(body)
    logger.info("user created", extra={"user_id": user.id})
    return user


@router.get("/wallet/{address}", response_model=User)
async def get_user_by_wallet(address: str, storage: Storage = Depends(get_storage)):
    user = storage.get_user_by_wallet_address(address)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: int, storage: Storage = Depends(get_storage)):
    user = storage.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
