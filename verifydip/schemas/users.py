from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from verifydip.schemas.base import CamelInput, CamelModel


class User(CamelModel):
    id: int
    wallet_address: str
    username: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime


class UserCreate(CamelInput):
    wallet_address: str = Field(..., min_length=1)
    username: Optional[str] = None
    email: Optional[str] = None
