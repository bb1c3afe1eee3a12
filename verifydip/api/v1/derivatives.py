from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from verifydip.core.deps import get_storage
from verifydip.schemas.derivatives import DerivativeWork, DerivativeWorkCreate
from verifydip.storage.base import Storage

router = APIRouter(prefix="/derivatives")


@router.post("", response_model=DerivativeWork)
async def create_derivative_work(body: DerivativeWorkCreate, storage: Storage = Depends(get_storage)):
    return storage.create_derivative_work(body)


@router.get("/parent/{parent_ip_id}", response_model=List[DerivativeWork])
async def list_derivatives(parent_ip_id: str, storage: Storage = Depends(get_storage)):
    return storage.get_derivative_works_by_parent_id(parent_ip_id)
