from decimal import Decimal
from pathlib import Path


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "storage": "memory"}
    assert "X-Request-Id" in r.headers


def test_request_id_is_echoed(client):
    r = client.get("/api/health", headers={"X-Request-Id": "req-123"})
    assert r.headers["X-Request-Id"] == "req-123"


def test_create_user_is_get_or_create(client, new_user):
    first = new_user("0xabc", username="sari")
    again = new_user("0xabc", username="other")

    assert first["id"] == 1
    assert first["walletAddress"] == "0xabc"
    assert first["username"] == "sari"
    assert again["id"] == first["id"]
    assert again["username"] == "sari"


def test_get_user_routes(client, new_user):
    user = new_user("0xabc")

    assert client.get(f"/api/users/{user['id']}").json()["walletAddress"] == "0xabc"
    assert client.get("/api/users/wallet/0xabc").json()["id"] == user["id"]
    assert client.get("/api/users/999").status_code == 404
    assert client.get("/api/users/wallet/0xnobody").status_code == 404


def test_create_user_validation(client):
    r = client.post("/api/users", json={})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid request"
    assert r.json()["errors"]


def test_upload_ip_asset(client, new_user, new_asset, settings):
    user = new_user()
    asset = new_asset(user["id"], culturalOrigin="Batak", royaltyRate="7.5")

    assert asset["id"] == 1
    assert asset["ipId"].startswith("ip_1_")
    assert asset["userId"] == user["id"]
    assert asset["status"] == "pending"
    assert asset["assetType"] == "design"
    assert asset["culturalOrigin"] == "Batak"
    assert Decimal(asset["royaltyRate"]) == Decimal("7.5")
    assert asset["idgtRegistered"] is False

    stored = Path(settings.upload_dir) / asset["fileName"]
    assert stored.read_bytes() == b"\x89PNG fake image bytes"
    assert asset["fileSize"] == stored.stat().st_size


def test_upload_defaults_royalty_rate(client, new_user, new_asset):
    asset = new_asset(new_user()["id"])
    assert Decimal(asset["royaltyRate"]) == Decimal("5.00")


def test_upload_requires_file_and_user(client):
    r = client.post("/api/ip-assets", data={"userId": "1", "title": "x", "assetType": "design"})
    assert r.status_code == 400
    assert r.json()["detail"] == "File is required"

    files = {"file": ("a.png", b"png", "image/png")}
    r = client.post("/api/ip-assets", data={"title": "x", "assetType": "design"}, files=files)
    assert r.status_code == 400
    assert r.json()["detail"] == "User ID is required"


def test_upload_rejects_type_and_size(client):
    data = {"userId": "1", "title": "x", "assetType": "design"}

    r = client.post("/api/ip-assets", data=data, files={"file": ("a.txt", b"hello", "text/plain")})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid file type"

    big = b"x" * 2048
    r = client.post("/api/ip-assets", data=data, files={"file": ("a.png", big, "image/png")})
    assert r.status_code == 413


def test_upload_rejects_bad_fields(client, settings):
    files = {"file": ("a.png", b"png", "image/png")}
    r = client.post(
        "/api/ip-assets",
        data={"userId": "1", "title": "x", "assetType": "painting"},
        files=files,
    )
    assert r.status_code == 400
    assert r.json()["detail"]["message"] == "Invalid IP asset data"

    assert list(Path(settings.upload_dir).iterdir()) == []


def test_list_get_and_patch_assets(client, new_user, new_asset):
    u1 = new_user("0x1")
    u2 = new_user("0x2")
    a1 = new_asset(u1["id"], title="one")
    new_asset(u2["id"], title="two")
    a3 = new_asset(u1["id"], title="three")

    listed = client.get(f"/api/ip-assets/user/{u1['id']}").json()
    assert [a["id"] for a in listed] == [a1["id"], a3["id"]]
    assert client.get("/api/ip-assets/user/999").json() == []

    assert client.get(f"/api/ip-assets/{a1['id']}").json()["title"] == "one"
    assert client.get("/api/ip-assets/999").status_code == 404

    r = client.patch(f"/api/ip-assets/{a1['id']}", json={"description": "woven cloth"})
    assert r.status_code == 200
    body = r.json()
    assert body["description"] == "woven cloth"
    assert body["title"] == "one"
    assert body["ipId"] == a1["ipId"]

    assert client.patch("/api/ip-assets/999", json={"title": "x"}).status_code == 404


def test_patch_rejects_identity_fields(client, new_user, new_asset):
    asset = new_asset(new_user()["id"])

    r = client.patch(f"/api/ip-assets/{asset['id']}", json={"ipId": "ip_0_0"})
    assert r.status_code == 400

    r = client.patch(f"/api/ip-assets/{asset['id']}", json={"title": None})
    assert r.status_code == 400


def test_verify(client, new_user, new_asset):
    user = new_user()
    asset = new_asset(user["id"])
    client.post(
        "/api/derivatives",
        json={"parentIpId": asset["ipId"], "childIpId": "ip_x", "licenseTermsId": "1"},
    )

    r = client.get(f"/api/verify/{asset['ipId']}")
    assert r.status_code == 200
    body = r.json()
    assert body["verified"] is True
    assert body["asset"]["id"] == asset["id"]
    assert body["owner"]["walletAddress"] == "0xabc"
    assert body["derivatives"] == 1

    r = client.get("/api/verify/ip_404_0")
    assert r.status_code == 404
    assert r.json()["detail"] == {"message": "IP asset not found", "verified": False}
