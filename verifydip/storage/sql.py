from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from verifydip.core.types import IpAssetStatus, RoyaltyStatus
from verifydip.models import DerivativeWorkRow, IpAssetRow, RoyaltyPaymentRow, UserRow
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

R = TypeVar("R", bound=BaseModel)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _record(model: Type[R], row) -> R:
    values = {name: getattr(row, name) for name in model.model_fields}
    created_at = values.get("created_at")
    # SQLite drops tzinfo on the way back
    if created_at is not None and created_at.tzinfo is None:
        values["created_at"] = created_at.replace(tzinfo=timezone.utc)
    return model(**values)


class SqlStorage(Storage):
    """
    Same contract as MemStorage on SQLAlchemy tables. One session per call;
    writes commit before returning.

    Unlike MemStorage, users.wallet_address carries a unique constraint, so a
    direct duplicate create_user raises IntegrityError.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    # ─────────── USERS ───────────
    def get_user(self, user_id: int) -> Optional[User]:
        with self._session_factory() as db:
            row = db.get(UserRow, user_id)
            return _record(User, row) if row else None

    def get_user_by_wallet_address(self, wallet_address: str) -> Optional[User]:
        with self._session_factory() as db:
            row = db.scalars(
                select(UserRow)
                .where(UserRow.wallet_address == wallet_address)
                .order_by(UserRow.id)
                .limit(1)
            ).first()
            return _record(User, row) if row else None

    def create_user(self, data: UserCreate) -> User:
        with self._session_factory.begin() as db:
            row = UserRow(
                wallet_address=data.wallet_address,
                username=data.username or None,
                email=data.email or None,
                created_at=_now(),
            )
            db.add(row)
            db.flush()
            return _record(User, row)

    # ─────────── IP ASSETS ───────────
    def get_ip_asset(self, asset_id: int) -> Optional[IpAsset]:
        with self._session_factory() as db:
            row = db.get(IpAssetRow, asset_id)
            return _record(IpAsset, row) if row else None

    def get_ip_asset_by_ip_id(self, ip_id: str) -> Optional[IpAsset]:
        with self._session_factory() as db:
            row = db.scalars(select(IpAssetRow).where(IpAssetRow.ip_id == ip_id)).first()
            return _record(IpAsset, row) if row else None

    def get_ip_assets_by_user_id(self, user_id: int) -> List[IpAsset]:
        with self._session_factory() as db:
            rows = db.scalars(
                select(IpAssetRow).where(IpAssetRow.user_id == user_id).order_by(IpAssetRow.id)
            ).all()
            return [_record(IpAsset, r) for r in rows]

    def create_ip_asset(self, data: IpAssetCreate, *, user_id: Optional[int]) -> IpAsset:
        with self._session_factory.begin() as db:
            created_at = _now()
            row = IpAssetRow(
                **data.model_dump(),
                # placeholder until the insert assigns the id
                ip_id=f"pending-{uuid.uuid4().hex}",
                user_id=user_id,
                idgt_registered=False,
                status=IpAssetStatus.pending.value,
                created_at=created_at,
            )
            db.add(row)
            db.flush()

            row.ip_id = make_ip_id(row.id, int(created_at.timestamp() * 1000))
            db.flush()
            return _record(IpAsset, row)

    def update_ip_asset(self, asset_id: int, updates: IpAssetUpdate) -> Optional[IpAsset]:
        with self._session_factory.begin() as db:
            row = db.get(IpAssetRow, asset_id)
            if row is None:
                return None

            for key, value in updates.model_dump(exclude_unset=True).items():
                setattr(row, key, value)
            db.flush()
            return _record(IpAsset, row)

    # ─────────── ROYALTIES ───────────
    def get_royalty_payments_by_ip_asset_id(self, ip_asset_id: int) -> List[RoyaltyPayment]:
        with self._session_factory() as db:
            rows = db.scalars(
                select(RoyaltyPaymentRow)
                .where(RoyaltyPaymentRow.ip_asset_id == ip_asset_id)
                .order_by(RoyaltyPaymentRow.id)
            ).all()
            return [_record(RoyaltyPayment, r) for r in rows]

    def get_royalty_payments_by_user_id(self, user_id: int) -> List[RoyaltyPayment]:
        with self._session_factory() as db:
            asset_ids = db.scalars(
                select(IpAssetRow.id).where(IpAssetRow.user_id == user_id)
            ).all()
            if not asset_ids:
                return []

            rows = db.scalars(
                select(RoyaltyPaymentRow)
                .where(RoyaltyPaymentRow.ip_asset_id.in_(asset_ids))
                .order_by(RoyaltyPaymentRow.id)
            ).all()
            return [_record(RoyaltyPayment, r) for r in rows]

    def create_royalty_payment(self, data: RoyaltyPaymentCreate) -> RoyaltyPayment:
        with self._session_factory.begin() as db:
            row = RoyaltyPaymentRow(
                **data.model_dump(),
                status=RoyaltyStatus.pending.value,
                created_at=_now(),
            )
            db.add(row)
            db.flush()
            return _record(RoyaltyPayment, row)

    def update_royalty_payment(
        self, payment_id: int, updates: RoyaltyPaymentUpdate
    ) -> Optional[RoyaltyPayment]:
        with self._session_factory.begin() as db:
            row = db.get(RoyaltyPaymentRow, payment_id)
            if row is None:
                return None

            for key, value in updates.model_dump(exclude_unset=True).items():
                setattr(row, key, value)
            db.flush()
            return _record(RoyaltyPayment, row)

    # ─────────── DERIVATIVES ───────────
    def get_derivative_works_by_parent_id(self, parent_ip_id: str) -> List[DerivativeWork]:
        with self._session_factory() as db:
            rows = db.scalars(
                select(DerivativeWorkRow)
                .where(DerivativeWorkRow.parent_ip_id == parent_ip_id)
                .order_by(DerivativeWorkRow.id)
            ).all()
            return [_record(DerivativeWork, r) for r in rows]

    def create_derivative_work(self, data: DerivativeWorkCreate) -> DerivativeWork:
        with self._session_factory.begin() as db:
            row = DerivativeWorkRow(**data.model_dump(), created_at=_now())
            db.add(row)
            db.flush()
            return _record(DerivativeWork, row)
