import re
from decimal import Decimal

HEX_TX = re.compile(r"0x[0-9a-f]{64}")


def record_payment(client, ip_asset_id, amount):
    r = client.post(
        "/api/royalties",
        json={"ipAssetId": ip_asset_id, "amount": amount, "claimerAddress": "0xclaimer"},
    )
    assert r.status_code == 200, r.text
    return r.json()


def test_record_and_list_payments_for_asset(client, new_user, new_asset):
    asset = new_asset(new_user()["id"])
    p = record_payment(client, asset["id"], "12.5")

    assert p["id"] == 1
    assert p["status"] == "pending"
    assert p["currency"] == "WIP"
    assert Decimal(p["amount"]) == Decimal("12.5")

    listed = client.get(f"/api/royalties/ip-asset/{asset['id']}").json()
    assert [x["id"] for x in listed] == [p["id"]]


def test_user_summary_totals_by_status(client, new_user, new_asset):
    owner = new_user("0xowner")
    other = new_user("0xother")
    mine = new_asset(owner["id"])
    theirs = new_asset(other["id"])

    p1 = record_payment(client, mine["id"], "10")
    record_payment(client, mine["id"], "2.5")
    record_payment(client, theirs["id"], "99")
    record_payment(client, None, "7")

    r = client.patch(f"/api/royalties/{p1['id']}/claim", json={"txHash": "0xfeed"})
    assert r.status_code == 200
    assert r.json()["status"] == "claimed"
    assert r.json()["txHash"] == "0xfeed"

    summary = client.get(f"/api/royalties/user/{owner['id']}").json()
    assert len(summary["payments"]) == 2
    assert Decimal(summary["totalEarned"]) == Decimal("10")
    assert Decimal(summary["availableToClaim"]) == Decimal("2.5")


def test_summary_for_unknown_user_is_empty(client):
    summary = client.get("/api/royalties/user/42").json()
    assert summary["payments"] == []
    assert Decimal(summary["totalEarned"]) == 0


def test_claim_errors(client):
    assert client.patch("/api/royalties/5/claim", json={"txHash": "0x1"}).status_code == 404
    assert client.patch("/api/royalties/5/claim", json={}).status_code == 400


def test_negative_amount_rejected(client):
    r = client.post("/api/royalties", json={"amount": "-1", "claimerAddress": "0xc"})
    assert r.status_code == 400


def test_derivatives_routes(client):
    for child in ["c1", "c2"]:
        r = client.post(
            "/api/derivatives",
            json={"parentIpId": "ip_1_1", "childIpId": child, "licenseTermsId": "1"},
        )
        assert r.status_code == 200

    listed = client.get("/api/derivatives/parent/ip_1_1").json()
    assert [d["childIpId"] for d in listed] == ["c1", "c2"]
    assert [d["id"] for d in listed] == [1, 2]
    assert client.get("/api/derivatives/parent/none").json() == []


def test_story_register_updates_asset_and_links_parents(client, new_user, new_asset, storage):
    asset = new_asset(new_user()["id"])

    r = client.post(
        "/api/story/register-ip",
        json={
            "ipAssetId": asset["id"],
            "parentIpIds": ["ip_parent_a", "ip_parent_b"],
            "licenseTermsIds": ["7"],
        },
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["success"] is True
    assert body["derivativesRegistered"] == 2
    assert HEX_TX.fullmatch(body["txHash"])

    stored = storage.get_ip_asset(asset["id"])
    assert stored.status == "registered"
    assert stored.story_ip_id == body["ipId"]
    assert stored.registration_tx_hash == body["txHash"]
    assert stored.license_terms_id == "7"
    assert stored.ip_id == asset["ipId"]

    links = storage.get_derivative_works_by_parent_id("ip_parent_b")
    assert [(w.child_ip_id, w.license_terms_id) for w in links] == [(asset["ipId"], "7")]


def test_story_register_errors(client, new_user, new_asset):
    r = client.post("/api/story/register-ip", json={"ipAssetId": 404})
    assert r.status_code == 404

    asset = new_asset(new_user()["id"])
    r = client.post(
        "/api/story/register-ip",
        json={"ipAssetId": asset["id"], "parentIpIds": ["ip_p"]},
    )
    assert r.status_code == 400


def test_story_claim_revenue(client):
    r = client.post(
        "/api/story/claim-revenue",
        json={"ancestorIpId": "ip_1_1", "claimer": "0xabc"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["currency"] == "WIP"
    assert Decimal("0") <= Decimal(body["claimedAmount"]) < Decimal("10")
    assert HEX_TX.fullmatch(body["txHash"])
