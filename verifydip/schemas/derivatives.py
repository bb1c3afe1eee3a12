from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from verifydip.schemas.base import CamelInput, CamelModel


class DerivativeWork(CamelModel):
    id: int
    parent_ip_id: str
    child_ip_id: str
    license_terms_id: str
    registration_tx_hash: Optional[str] = None
    created_at: datetime


class DerivativeWorkCreate(CamelInput):
    # parent/child are free-form Story Protocol identifiers, not checked against stored assets
    parent_ip_id: str = Field(..., min_length=1)
    child_ip_id: str = Field(..., min_length=1)
    license_terms_id: str = Field(..., min_length=1)
    registration_tx_hash: Optional[str] = None
