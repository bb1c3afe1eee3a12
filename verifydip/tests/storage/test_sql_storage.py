import re
from datetime import timezone
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from verifydip.db.base import Base
from verifydip.db.session import make_engine, make_session_factory
from verifydip.schemas import (
    DerivativeWorkCreate,
    IpAssetCreate,
    IpAssetUpdate,
    RoyaltyPaymentCreate,
    RoyaltyPaymentUpdate,
    UserCreate,
)
from verifydip.storage.sql import SqlStorage

import verifydip.models  # noqa: F401


@pytest.fixture
def store():
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield SqlStorage(make_session_factory(engine))
    engine.dispose()


def asset_input(title="Gamelan Suite", **kw):
    return IpAssetCreate(title=title, asset_type="song", file_name="gamelan.mp3", **kw)


def test_create_and_fetch_user(store):
    user = store.create_user(UserCreate(wallet_address="0xabc", username="sari"))

    assert user.id == 1
    assert user.created_at.tzinfo is not None
    assert store.get_user(1) == user
    assert store.get_user_by_wallet_address("0xabc").id == 1
    assert store.get_user_by_wallet_address("0xdef") is None
    assert store.get_user(2) is None


def test_duplicate_wallet_violates_unique_column(store):
    store.create_user(UserCreate(wallet_address="0xabc"))
    with pytest.raises(IntegrityError):
        store.create_user(UserCreate(wallet_address="0xabc"))


def test_ip_asset_gets_derived_ip_id(store):
    user = store.create_user(UserCreate(wallet_address="0xabc"))
    a1 = store.create_ip_asset(asset_input(), user_id=user.id)
    a2 = store.create_ip_asset(asset_input(), user_id=user.id)

    assert re.fullmatch(r"ip_1_\d+", a1.ip_id)
    assert re.fullmatch(r"ip_2_\d+", a2.ip_id)
    assert a1.status == "pending"
    assert a1.idgt_registered is False
    assert a1.royalty_rate == Decimal("5.00")
    assert a1.created_at.tzinfo == timezone.utc
    assert store.get_ip_asset_by_ip_id(a2.ip_id).id == 2


def test_update_merges_and_keeps_identity(store):
    asset = store.create_ip_asset(asset_input(region="Java"), user_id=None)

    updated = store.update_ip_asset(asset.id, IpAssetUpdate(status="registered", license_terms_id="1"))

    assert updated.status == "registered"
    assert updated.license_terms_id == "1"
    assert updated.region == "Java"
    assert updated.ip_id == asset.ip_id
    assert store.get_ip_asset(asset.id).status == "registered"
    assert store.update_ip_asset(42, IpAssetUpdate(title="x")) is None


def test_royalties_by_user_excludes_other_and_unlinked(store):
    a1 = store.create_ip_asset(asset_input(), user_id=None)
    owner = store.create_user(UserCreate(wallet_address="0xowner"))
    a2 = store.create_ip_asset(asset_input(), user_id=owner.id)
    a3 = store.create_ip_asset(asset_input(), user_id=owner.id)

    store.create_royalty_payment(RoyaltyPaymentCreate(ip_asset_id=a3.id, amount=Decimal("1.5"), claimer_address="0xc"))
    store.create_royalty_payment(RoyaltyPaymentCreate(ip_asset_id=a1.id, amount=Decimal("2"), claimer_address="0xc"))
    store.create_royalty_payment(RoyaltyPaymentCreate(amount=Decimal("3"), claimer_address="0xc"))
    store.create_royalty_payment(RoyaltyPaymentCreate(ip_asset_id=a2.id, amount=Decimal("4"), claimer_address="0xc"))

    payments = store.get_royalty_payments_by_user_id(owner.id)
    assert [p.amount for p in payments] == [Decimal("1.5"), Decimal("4")]
    assert store.get_royalty_payments_by_user_id(99) == []


def test_claim_royalty_payment(store):
    p = store.create_royalty_payment(RoyaltyPaymentCreate(amount=Decimal("10"), claimer_address="0xc"))

    claimed = store.update_royalty_payment(p.id, RoyaltyPaymentUpdate(status="claimed", tx_hash="0xfeed"))

    assert claimed.status == "claimed"
    assert claimed.tx_hash == "0xfeed"
    assert claimed.currency == "WIP"
    assert store.update_royalty_payment(99, RoyaltyPaymentUpdate(status="claimed")) is None


def test_derivatives_by_parent_in_creation_order(store):
    store.create_derivative_work(DerivativeWorkCreate(parent_ip_id="p", child_ip_id="c1", license_terms_id="1"))
    store.create_derivative_work(DerivativeWorkCreate(parent_ip_id="x", child_ip_id="c2", license_terms_id="1"))
    store.create_derivative_work(DerivativeWorkCreate(parent_ip_id="p", child_ip_id="c3", license_terms_id="1"))

    assert [w.child_ip_id for w in store.get_derivative_works_by_parent_id("p")] == ["c1", "c3"]
