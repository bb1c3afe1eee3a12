#verifydip/services/defi_service.py
from __future__ import annotations

import logging
import secrets
import time
from decimal import Decimal, localcontext

from verifydip.core.hashing import mock_tx_hash
from verifydip.schemas.defi import (
    BorrowResponse,
    DefiStats,
    IpRegistrySummary,
    LoanPosition,
    PatternMetadata,
    PatternRegisterResponse,
    PatternToken,
    RepayResponse,
    StakeResponse,
    StakingPosition,
    UnstakeResponse,
)

logger = logging.getLogger(__name__)

LST_PRICE_USD = Decimal("100")
MAX_LTV = Decimal("0.9")
LIQUIDATION_FACTOR = Decimal("0.95")
REPAY_INTEREST_SHARE = Decimal("0.03")
UNSTAKE_DELAY_MS = 7 * 24 * 60 * 60 * 1000

CENTS = Decimal("0.01")
# health factor can reach ~1e34 at the schema bounds, beyond the default 28 digits
PRECISION = 60


class BorrowLimitExceeded(ValueError):
    def __init__(self, max_borrowable: Decimal):
        self.max_borrowable = max_borrowable
        super().__init__(
            f"Borrow amount exceeds 90% LTV. Max borrowable: {max_borrowable.quantize(CENTS)} IPUSD"
        )


class DefiService:
    """
    Mocked liquid staking, pattern registry and IPUSD borrowing.
    Positions and stats are fixed demo figures; writes return random tx hashes.
    """

    # ─────────── STAKING ───────────
    def staking_position(self, address: str) -> StakingPosition:
        return StakingPosition(
            staked_amount=Decimal("1000.0"),
            lst_balance=Decimal("1050.0"),
            rewards=Decimal("50.0"),
            exchange_rate=Decimal("1.05"),
            unstake_requests=[],
            total_value_locked=Decimal("50000000.0"),
        )

    def stake(self, amount: Decimal, user_address: str) -> StakeResponse:
        lst_minted = amount  # 1:1 until rewards accrue
        logger.info("stake", extra={"user_address": user_address, "amount": str(amount)})
        return StakeResponse(
            transaction_hash=mock_tx_hash(),
            lst_minted=lst_minted,
            message=f"Staked {amount} tokens and minted {lst_minted} LST",
        )

    def unstake(self, amount: Decimal, user_address: str) -> UnstakeResponse:
        logger.info("unstake requested", extra={"user_address": user_address, "amount": str(amount)})
        return UnstakeResponse(
            transaction_hash=mock_tx_hash(),
            unlock_time=int(time.time() * 1000) + UNSTAKE_DELAY_MS,
            message=f"Unstake request for {amount} LST submitted. Unlock in 7 days.",
        )

    # ─────────── PATTERN REGISTRY ───────────
    def ip_registry(self, address: str) -> IpRegistrySummary:
        return IpRegistrySummary(
            owned_tokens=[
                PatternToken(
                    token_id=1,
                    pattern_name="Batak Ulos Sacred Pattern",
                    cultural_origin="Batak",
                    artisan_name="Maria Simbolon",
                    is_verified=True,
                    royalty_percentage=5,
                    registration_date="2024-01-15",
                ),
                PatternToken(
                    token_id=2,
                    pattern_name="Javanese Batik Kawung",
                    cultural_origin="Javanese",
                    artisan_name="Pak Suharto",
                    is_verified=False,
                    royalty_percentage=3,
                    registration_date="2024-01-20",
                ),
            ],
            total_registered=127,
            verified_count=89,
        )

    def register_pattern(self, metadata: PatternMetadata, owner_address: str) -> PatternRegisterResponse:
        token_id = secrets.randbelow(10000) + 1
        logger.info("pattern registered", extra={"owner_address": owner_address, "token_id": token_id})
        return PatternRegisterResponse(
            transaction_hash=mock_tx_hash(),
            token_id=token_id,
            message=f'IP pattern "{metadata.pattern_name}" registered successfully',
            metadata=metadata,
        )

    # ─────────── BORROWING ───────────
    def loan_position(self, address: str) -> LoanPosition:
        return LoanPosition(
            has_position=True,
            collateral_amount=Decimal("500.0"),
            borrowed_amount=Decimal("400.0"),
            accrued_interest=Decimal("12.0"),
            health_factor=125,
            utilization_ratio=82,
            collateral_value=Decimal("525.0"),
            borrowing_capacity=Decimal("472.5"),
            liquidation_threshold=Decimal("498.75"),
            interest_rate=Decimal("3.0"),
        )

    def borrow(self, collateral_amount: Decimal, borrow_amount: Decimal, user_address: str) -> BorrowResponse:
        with localcontext() as ctx:
            ctx.prec = PRECISION
            collateral_value = collateral_amount * LST_PRICE_USD
            max_borrowable = collateral_value * MAX_LTV
            if borrow_amount > max_borrowable:
                raise BorrowLimitExceeded(max_borrowable)

            health_factor = (collateral_value * LIQUIDATION_FACTOR / borrow_amount * 100).quantize(CENTS)
        logger.info(
            "borrow",
            extra={"user_address": user_address, "borrow_amount": str(borrow_amount), "health_factor": str(health_factor)},
        )
        return BorrowResponse(
            transaction_hash=mock_tx_hash(),
            collateral_deposited=collateral_amount,
            stablecoin_minted=borrow_amount,
            health_factor=health_factor,
            message=f"Borrowed {borrow_amount} IPUSD against {collateral_amount} LST collateral",
        )

    def repay(self, amount: Decimal, user_address: str) -> RepayResponse:
        with localcontext() as ctx:
            ctx.prec = PRECISION
            interest = (amount * REPAY_INTEREST_SHARE).quantize(CENTS)
            principal = (amount - amount * REPAY_INTEREST_SHARE).quantize(CENTS)
        logger.info("repay", extra={"user_address": user_address, "amount": str(amount)})
        return RepayResponse(
            transaction_hash=mock_tx_hash(),
            total_repaid=amount,
            principal_paid=principal,
            interest_paid=interest,
            message=f"Repaid {amount} IPUSD ({principal} principal + {interest} interest)",
        )

    def stats(self) -> DefiStats:
        return DefiStats(
            total_value_locked="50,000,000",
            total_staked="35,000,000",
            total_borrowed="28,000,000",
            average_health_factor=145,
            registered_patterns=127,
            verified_patterns=89,
            active_borrowers=1234,
            liquidation_events=12,
        )
