from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from verifydip.schemas import (
    DerivativeWork,
    DerivativeWorkCreate,
    IpAsset,
    IpAssetCreate,
    IpAssetUpdate,
    RoyaltyPayment,
    RoyaltyPaymentCreate,
    RoyaltyPaymentUpdate,
    User,
    UserCreate,
)


def make_ip_id(asset_id: int, created_at_ms: int) -> str:
    # unique through asset_id alone; the timestamp is for display
    return f"ip_{asset_id}_{created_at_ms}"


class Storage(ABC):
    """
    Repository for users, IP assets, royalty payments and derivative works.

    Contract shared by every backend:
    - ids are per-kind, sequential from 1 and never reused
    - reads and writes hand back value copies, never live references
    - "not found" is None (single lookups, updates) or [] (lists), never an exception
    - lists come back in creation order
    - updates merge only the fields explicitly set on the update structure
    - nothing is ever deleted
    """

    # ─────────── USERS ───────────
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_wallet_address(self, wallet_address: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, data: UserCreate) -> User:
        """
        Does not check wallet uniqueness; callers look the address up first.
        """

    # ─────────── IP ASSETS ───────────
    @abstractmethod
    def get_ip_asset(self, asset_id: int) -> Optional[IpAsset]: ...

    @abstractmethod
    def get_ip_asset_by_ip_id(self, ip_id: str) -> Optional[IpAsset]: ...

    @abstractmethod
    def get_ip_assets_by_user_id(self, user_id: int) -> List[IpAsset]: ...

    @abstractmethod
    def create_ip_asset(self, data: IpAssetCreate, *, user_id: Optional[int]) -> IpAsset: ...

    @abstractmethod
    def update_ip_asset(self, asset_id: int, updates: IpAssetUpdate) -> Optional[IpAsset]: ...

    # ─────────── ROYALTIES ───────────
    @abstractmethod
    def get_royalty_payments_by_ip_asset_id(self, ip_asset_id: int) -> List[RoyaltyPayment]: ...

    @abstractmethod
    def get_royalty_payments_by_user_id(self, user_id: int) -> List[RoyaltyPayment]:
        """
        Payments attached to any IP asset owned by user_id: resolve the user's
        asset ids first, then filter payments by ip_asset_id.
        """

    @abstractmethod
    def create_royalty_payment(self, data: RoyaltyPaymentCreate) -> RoyaltyPayment: ...

    @abstractmethod
    def update_royalty_payment(
        self, payment_id: int, updates: RoyaltyPaymentUpdate
    ) -> Optional[RoyaltyPayment]: ...

    # ─────────── DERIVATIVES ───────────
    @abstractmethod
    def get_derivative_works_by_parent_id(self, parent_ip_id: str) -> List[DerivativeWork]: ...

    @abstractmethod
    def create_derivative_work(self, data: DerivativeWorkCreate) -> DerivativeWork: ...
