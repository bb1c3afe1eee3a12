from __future__ import annotations

from typing import Optional

from verifydip.schemas.base import CamelModel
from verifydip.schemas.ip_assets import IpAsset
from verifydip.schemas.users import User


class VerificationResponse(CamelModel):
    verified: bool
    asset: IpAsset
    owner: Optional[User] = None
    derivatives: int = 0
