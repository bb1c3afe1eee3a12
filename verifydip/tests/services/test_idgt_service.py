import pytest

from verifydip.core.config import Settings
from verifydip.schemas import IpAssetCreate
from verifydip.services.idgt_agent import MAX_WEI, format_tokens
from verifydip.services.idgt_service import IdgtService
from verifydip.storage.memory import MemStorage


@pytest.fixture
def store():
    return MemStorage()


def make_service(store, key="0x" + "cd" * 32):
    return IdgtService(store, Settings(_env_file=None, wallet_private_key=key))


def test_registration_of_missing_asset_returns_none(store):
    svc = make_service(store)

    assert svc.process_ip_registration(1, "0xabc", "ip_1_1") is None


def test_missing_asset_wins_over_missing_key(store):
    svc = make_service(store, key=None)

    assert svc.process_ip_registration(1, "0xabc", "ip_1_1") is None


def test_registration_failure_is_a_result(store):
    asset = store.create_ip_asset(
        IpAssetCreate(title="Tenun", asset_type="design", file_name="t.png"), user_id=1
    )
    svc = make_service(store, key=None)

    result = svc.process_ip_registration(asset.id, "0xabc", asset.ip_id)

    assert result.success is False
    assert "WALLET_PRIVATE_KEY" in result.error
    assert store.get_ip_asset(asset.id).idgt_registered is False


def test_format_tokens_handles_full_uint256_range():
    assert format_tokens(0) == "0.00 IDGT"
    assert format_tokens(MAX_WEI).endswith(".58 IDGT")
    assert format_tokens(10 ** 50) == "1" + "0" * 32 + ".00 IDGT"


def test_wei_above_uint256_is_a_failed_payment(store):
    svc = make_service(store)

    assert svc.process_royalty_payment("ip_1_1", str(MAX_WEI), "0xp").success is True

    result = svc.process_royalty_payment("ip_1_1", str(MAX_WEI + 1), "0xp")
    assert result.success is False
    assert result.error == "amount exceeds the uint256 range"

    result = svc.process_usage_fee("ip_1_1", str(MAX_WEI + 1), "0xu")
    assert result.success is False
    assert result.error == "ethAmount exceeds the uint256 range"
