from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional

from verifydip.core.types import IpAssetStatus, RoyaltyStatus
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
from verifydip.storage.base import Storage, make_ip_id


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MemStorage(Storage):
    """
    Process-lifetime store. Dicts keep insertion order, which is creation order
    since ids only grow. One re-entrant lock covers all maps and counters.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()

        self._users: Dict[int, User] = {}
        self._ip_assets: Dict[int, IpAsset] = {}
        self._royalty_payments: Dict[int, RoyaltyPayment] = {}
        self._derivative_works: Dict[int, DerivativeWork] = {}

        self._next_user_id = 1
        self._next_ip_asset_id = 1
        self._next_royalty_id = 1
        self._next_derivative_id = 1

    # ─────────── USERS ───────────
    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy(deep=True) if user else None

    def get_user_by_wallet_address(self, wallet_address: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.wallet_address == wallet_address:
                    return user.model_copy(deep=True)
            return None

    def create_user(self, data: UserCreate) -> User:
        with self._lock:
            user_id = self._next_user_id
            self._next_user_id += 1

            user = User(
                id=user_id,
                wallet_address=data.wallet_address,
                username=data.username or None,
                email=data.email or None,
                created_at=_now(),
            )
            self._users[user_id] = user
            return user.model_copy(deep=True)

    # ─────────── IP ASSETS ───────────
    def get_ip_asset(self, asset_id: int) -> Optional[IpAsset]:
        with self._lock:
            asset = self._ip_assets.get(asset_id)
            return asset.model_copy(deep=True) if asset else None

    def get_ip_asset_by_ip_id(self, ip_id: str) -> Optional[IpAsset]:
        with self._lock:
            for asset in self._ip_assets.values():
                if asset.ip_id == ip_id:
                    return asset.model_copy(deep=True)
            return None

    def get_ip_assets_by_user_id(self, user_id: int) -> List[IpAsset]:
        with self._lock:
            return [
                a.model_copy(deep=True)
                for a in self._ip_assets.values()
                if a.user_id == user_id
            ]

    def create_ip_asset(self, data: IpAssetCreate, *, user_id: Optional[int]) -> IpAsset:
        with self._lock:
            asset_id = self._next_ip_asset_id
            self._next_ip_asset_id += 1

            created_at = _now()
            asset = IpAsset(
                **data.model_dump(),
                id=asset_id,
                ip_id=make_ip_id(asset_id, int(created_at.timestamp() * 1000)),
                user_id=user_id,
                status=IpAssetStatus.pending,
                created_at=created_at,
            )
            self._ip_assets[asset_id] = asset
            return asset.model_copy(deep=True)

    def update_ip_asset(self, asset_id: int, updates: IpAssetUpdate) -> Optional[IpAsset]:
        with self._lock:
            existing = self._ip_assets.get(asset_id)
            if existing is None:
                return None

            updated = existing.model_copy(update=updates.model_dump(exclude_unset=True), deep=True)
            self._ip_assets[asset_id] = updated
            return updated.model_copy(deep=True)

    # ─────────── ROYALTIES ───────────
    def get_royalty_payments_by_ip_asset_id(self, ip_asset_id: int) -> List[RoyaltyPayment]:
        with self._lock:
            return [
                p.model_copy(deep=True)
                for p in self._royalty_payments.values()
                if p.ip_asset_id == ip_asset_id
            ]

    def get_royalty_payments_by_user_id(self, user_id: int) -> List[RoyaltyPayment]:
        with self._lock:
            asset_ids = {a.id for a in self._ip_assets.values() if a.user_id == user_id}
            return [
                p.model_copy(deep=True)
                for p in self._royalty_payments.values()
                if p.ip_asset_id is not None and p.ip_asset_id in asset_ids
            ]

    def create_royalty_payment(self, data: RoyaltyPaymentCreate) -> RoyaltyPayment:
        with self._lock:
            payment_id = self._next_royalty_id
            self._next_royalty_id += 1

            payment = RoyaltyPayment(
                **data.model_dump(),
                id=payment_id,
                status=RoyaltyStatus.pending,
                created_at=_now(),
            )
            self._royalty_payments[payment_id] = payment
            return payment.model_copy(deep=True)

    def update_royalty_payment(
        self, payment_id: int, updates: RoyaltyPaymentUpdate
    ) -> Optional[RoyaltyPayment]:
        with self._lock:
            existing = self._royalty_payments.get(payment_id)
            if existing is None:
                return None

            updated = existing.model_copy(update=updates.model_dump(exclude_unset=True), deep=True)
            self._royalty_payments[payment_id] = updated
            return updated.model_copy(deep=True)

    # ─────────── DERIVATIVES ───────────
    def get_derivative_works_by_parent_id(self, parent_ip_id: str) -> List[DerivativeWork]:
        with self._lock:
            return [
                w.model_copy(deep=True)
                for w in self._derivative_works.values()
                if w.parent_ip_id == parent_ip_id
            ]

    def create_derivative_work(self, data: DerivativeWorkCreate) -> DerivativeWork:
        with self._lock:
            derivative_id = self._next_derivative_id
            self._next_derivative_id += 1

            work = DerivativeWork(
                **data.model_dump(),
                id=derivative_id,
                created_at=_now(),
            )
            self._derivative_works[derivative_id] = work
            return work.model_copy(deep=True)
