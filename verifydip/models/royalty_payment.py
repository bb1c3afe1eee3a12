# /verifydip/models/royalty_payment.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from verifydip.db.base import Base


class RoyaltyPaymentRow(Base):
    __tablename__ = "royalty_payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ip_asset_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("ip_assets.id"), nullable=True, index=True
    )

    amount: Mapped[Decimal] = mapped_column(Numeric(18, 8), nullable=False)
    currency: Mapped[str] = mapped_column(String(16), nullable=False)
    claimer_address: Mapped[str] = mapped_column(String(128), nullable=False)
    tx_hash: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)

    status: Mapped[str] = mapped_column(String(16), nullable=False)  # pending | claimed | failed
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
