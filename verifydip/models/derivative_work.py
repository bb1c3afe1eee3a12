# /verifydip/models/derivative_work.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from verifydip.db.base import Base


class DerivativeWorkRow(Base):
    __tablename__ = "derivative_works"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # plain identifiers, no FK: parents may live only on-chain
    parent_ip_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    child_ip_id: Mapped[str] = mapped_column(String(128), nullable=False)
    license_terms_id: Mapped[str] = mapped_column(String(80), nullable=False)
    registration_tx_hash: Mapped[Optional[str]] = mapped_column(String(80), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
