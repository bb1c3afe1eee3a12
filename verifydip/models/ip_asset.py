# /verifydip/models/ip_asset.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from verifydip.db.base import Base


class IpAssetRow(Base):
    __tablename__ = "ip_assets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ip_id: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    user_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True, index=True
    )

    title: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    asset_type: Mapped[str] = mapped_column(String(16), nullable=False)  # design | song
    file_name: Mapped[str] = mapped_column(String(256), nullable=False)
    file_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    ipfs_hash: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    metadata_hash: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)

    cultural_origin: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    language: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    region: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)
    creation_date: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    royalty_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False)

    registration_tx_hash: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)
    license_terms_id: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)
    story_ip_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    idgt_registered: Mapped[bool] = mapped_column(Boolean, nullable=False)
    idgt_reward_amount: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)
    idgt_transaction_hash: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)

    status: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
