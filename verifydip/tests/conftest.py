import pytest
from fastapi.testclient import TestClient

from verifydip.core.config import Settings
from verifydip.main import create_app
from verifydip.storage.memory import MemStorage

TEST_PRIVATE_KEY = "0x" + "ab" * 32


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        upload_dir=str(tmp_path / "uploads"),
        max_upload_bytes=1024,
        wallet_private_key=TEST_PRIVATE_KEY,
    )


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def client(settings, storage):
    app = create_app(settings=settings, storage=storage)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def new_user(client):
    def _create(wallet="0xabc", **extra):
        r = client.post("/api/users", json={"walletAddress": wallet, **extra})
        assert r.status_code == 200, r.text
        return r.json()

    return _create


@pytest.fixture
def new_asset(client):
    def _upload(user_id, title="Ulos Ragidup", **fields):
        data = {"userId": str(user_id), "title": title, "assetType": "design", **fields}
        files = {"file": ("ulos.png", b"\x89PNG fake image bytes", "image/png")}
        r = client.post("/api/ip-assets", data=data, files=files)
        assert r.status_code == 200, r.text
        return r.json()

    return _upload
