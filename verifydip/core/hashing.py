from __future__ import annotations

import secrets


def random_hex(nbytes: int) -> str:
    return "0x" + secrets.token_hex(nbytes)


def mock_tx_hash() -> str:
    # 32-byte EVM transaction hash
    return random_hex(32)


def mock_address() -> str:
    # 20-byte EVM account address
    return random_hex(20)
