#verifydip/services/idgt_service.py
from __future__ import annotations

import logging
import re
import threading
from decimal import Decimal, localcontext
from typing import Optional

from verifydip.core.config import Settings
from verifydip.schemas.idgt import IdgtResult, IdgtStats, TokenInfo
from verifydip.schemas.ip_assets import IpAssetUpdate
from verifydip.services.idgt_agent import (
    MAX_WEI,
    TOKEN_PRECISION,
    WEI_PER_TOKEN,
    IdgtAgent,
    IdgtAgentError,
    format_tokens,
)
from verifydip.storage.base import Storage

logger = logging.getLogger(__name__)

REGISTRATION_REWARD_WEI = "100000000000000000000"  # 100 IDGT
USAGE_FEE_SHARE = Decimal("0.05")

_TX_RE = re.compile(r"Transaction: (0x[a-fA-F0-9]+)")


def _extract_tx_hash(receipt: str) -> str:
    match = _TX_RE.search(receipt)
    return match.group(1) if match else ""


def _parse_wei(raw: str, what: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise IdgtAgentError(f"{what} must be an integer amount in wei")
    if value > MAX_WEI:
        raise IdgtAgentError(f"{what} exceeds the uint256 range")
    return value


class IdgtService:
    """
    IDGT reward token flows. The agent is created on first use and shared
    afterwards; a missing wallet key turns every write into a failed result.
    """

    def __init__(self, storage: Storage, settings: Settings):
        self._storage = storage
        self._settings = settings
        self._agent: Optional[IdgtAgent] = None
        self._agent_lock = threading.Lock()

    def _get_agent(self) -> IdgtAgent:
        with self._agent_lock:
            if self._agent is None:
                if not self._settings.wallet_private_key:
                    raise IdgtAgentError("WALLET_PRIVATE_KEY environment variable is required")
                agent = IdgtAgent(
                    self._settings.wallet_private_key,
                    self._settings.story_rpc_url,
                    self._settings.story_ip_token_address,
                    self._settings.story_chain_id,
                )
                agent.initialize()
                self._agent = agent
            return self._agent

    def process_ip_registration(
        self, ip_asset_id: int, owner_address: str, ip_id: str
    ) -> Optional[IdgtResult]:
        """None when the asset does not exist; agent failures come back as success=False."""
        if self._storage.get_ip_asset(ip_asset_id) is None:
            return None

        try:
            receipt = self._get_agent().register_ip(ip_id, owner_address)
        except IdgtAgentError as exc:
            logger.warning("idgt registration failed", extra={"ip_asset_id": ip_asset_id, "error": str(exc)})
            return IdgtResult(success=False, error=str(exc))

        tx_hash = _extract_tx_hash(receipt)
        self._storage.update_ip_asset(
            ip_asset_id,
            IpAssetUpdate(
                idgt_registered=True,
                idgt_reward_amount=REGISTRATION_REWARD_WEI,
                idgt_transaction_hash=tx_hash,
            ),
        )
        logger.info("idgt reward issued", extra={"ip_asset_id": ip_asset_id, "tx_hash": tx_hash})
        return IdgtResult(success=True, transaction_hash=tx_hash, detail="100 IDGT")

    def process_royalty_payment(self, ip_id: str, amount: str, payer_address: str) -> IdgtResult:
        try:
            amount_wei = _parse_wei(amount, "amount")
            receipt = self._get_agent().pay_royalty(ip_id, amount_wei)
        except IdgtAgentError as exc:
            logger.warning(
                "idgt royalty payment failed",
                extra={"ip_id": ip_id, "payer_address": payer_address, "error": str(exc)},
            )
            return IdgtResult(success=False, error=str(exc))

        return IdgtResult(
            success=True,
            transaction_hash=_extract_tx_hash(receipt),
            detail=format_tokens(amount_wei),
        )

    def process_usage_fee(self, ip_id: str, eth_amount: str, user_address: str) -> IdgtResult:
        try:
            value_wei = _parse_wei(eth_amount, "ethAmount")
            receipt = self._get_agent().pay_usage_fee(ip_id, value_wei)
        except IdgtAgentError as exc:
            logger.warning(
                "idgt usage fee failed",
                extra={"ip_id": ip_id, "user_address": user_address, "error": str(exc)},
            )
            return IdgtResult(success=False, error=str(exc))

        with localcontext() as ctx:
            ctx.prec = TOKEN_PRECISION
            fee_eth = (Decimal(value_wei) / WEI_PER_TOKEN * USAGE_FEE_SHARE).quantize(Decimal("0.000001"))
        return IdgtResult(
            success=True,
            transaction_hash=_extract_tx_hash(receipt),
            detail=f"{fee_eth} ETH converted to IDGT",
        )

    def get_user_token_info(self, user_address: str) -> TokenInfo:
        try:
            return self._get_agent().account_summary(user_address)
        except IdgtAgentError:
            return TokenInfo(
                balance="0",
                royalties="0",
                balance_formatted="0.00 IDGT",
                royalties_formatted="0.00 IDGT",
            )

    def get_stats(self) -> IdgtStats:
        # demo figures; nothing is read from chain
        return IdgtStats(
            total_supply="1,000,000 IDGT",
            total_holders=42,
            total_royalties_paid="15,230.50 IDGT",
            total_ips_registered=127,
        )

    def process_agent_query(self, prompt: str) -> str:
        try:
            return self._get_agent().answer(prompt)
        except IdgtAgentError as exc:
            return f"Error processing request: {exc}"
