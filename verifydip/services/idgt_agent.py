#verifydip/services/idgt_agent.py
from __future__ import annotations

import logging
import re
from decimal import Decimal, localcontext

from verifydip.core.hashing import mock_tx_hash
from verifydip.schemas.idgt import TokenInfo

logger = logging.getLogger(__name__)

WEI_PER_TOKEN = Decimal(10) ** 18
MAX_WEI = 2 ** 256 - 1

# uint256 wei needs 78 digits; quantizing past the default 28 needs headroom
TOKEN_PRECISION = 100

_PRIVATE_KEY_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")


class IdgtAgentError(RuntimeError):
    pass


def format_tokens(wei: int, symbol: str = "IDGT") -> str:
    with localcontext() as ctx:
        ctx.prec = TOKEN_PRECISION
        return f"{(Decimal(wei) / WEI_PER_TOKEN).quantize(Decimal('0.01'))} {symbol}"


class IdgtAgent:
    """
    Stand-in for the IDGT token agent on Story Protocol.

    Every "transaction" is a random hash reported in a human-readable receipt
    line ("... Transaction: 0x..."), the same shape the real agent returned.
    Balances and royalties read as zero because nothing is ever minted.
    """

    def __init__(self, private_key: str, rpc_url: str, token_address: str, chain_id: int):
        if not _PRIVATE_KEY_RE.match(private_key or ""):
            raise IdgtAgentError("WALLET_PRIVATE_KEY must be a 0x-prefixed 32-byte hex string")
        self._private_key = private_key
        self.rpc_url = rpc_url
        self.token_address = token_address
        self.chain_id = chain_id

    def initialize(self) -> None:
        logger.info(
            "idgt agent initialized",
            extra={"rpc_url": self.rpc_url, "chain_id": self.chain_id, "token": self.token_address},
        )

    # ─────────── WRITES ───────────
    def register_ip(self, ip_id: str, owner_address: str) -> str:
        tx = mock_tx_hash()
        return (
            f"IP {ip_id} registered for owner {owner_address}. "
            f"Transaction: {tx}. 100 IDGT minted as reward."
        )

    def pay_royalty(self, ip_id: str, amount_wei: int) -> str:
        if amount_wei <= 0:
            raise IdgtAgentError("royalty amount must be positive")
        tx = mock_tx_hash()
        return f"Royalty payment of {amount_wei} IDGT wei for IP {ip_id} completed. Transaction: {tx}"

    def pay_usage_fee(self, ip_id: str, value_wei: int) -> str:
        if value_wei <= 0:
            raise IdgtAgentError("usage fee must be positive")
        tx = mock_tx_hash()
        return (
            f"Usage fee paid for IP {ip_id}. Transaction: {tx}. "
            "Fee converted to IDGT and paid to IP owner."
        )

    # ─────────── READS ───────────
    def balance_of(self, address: str) -> int:
        return 0

    def royalties_of(self, address: str) -> int:
        return 0

    def account_summary(self, address: str) -> TokenInfo:
        balance = self.balance_of(address)
        royalties = self.royalties_of(address)
        return TokenInfo(
            balance=str(balance),
            royalties=str(royalties),
            balance_formatted=format_tokens(balance),
            royalties_formatted=format_tokens(royalties),
        )

    def answer(self, prompt: str) -> str:
        return (
            f"IDGT agent (Story chain {self.chain_id}) received: {prompt.strip()}. "
            "Registering an IP asset earns 100 IDGT; royalties and usage fees are "
            "paid to the registered owner in IDGT."
        )
