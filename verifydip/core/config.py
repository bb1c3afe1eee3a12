from functools import lru_cache
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # ─────────── APP ───────────
    app_name: str = "VerifydIP"
    environment: str = "dev"
    log_level: str = "INFO"
    log_sql: bool = False  # SQLAlchemy statement logging, sql backend only

    # ─────────── API ───────────
    api_prefix: str = "/api"
    request_id_header: str = "X-Request-Id"
    cors_origins: List[str] = ["*"]

    # ─────────── STORAGE ───────────
    storage_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite:///./verifydip.db"  # only read when storage_backend == "sql"

    # ─────────── UPLOADS ───────────
    upload_dir: str = "uploads"
    max_upload_bytes: int = 50 * 1024 * 1024
    allowed_upload_types: List[str] = [
        "image/jpeg",
        "image/png",
        "image/svg+xml",
        "audio/mpeg",
        "audio/wav",
        "audio/ogg",
    ]

    # ─────────── STORY / IDGT ───────────
    wallet_private_key: Optional[str] = None
    story_rpc_url: str = "https://rpc.story.foundation"
    story_chain_id: int = 1513  # Aeneid testnet
    story_ip_token_address: str = "0x1514000000000000000000000000000000000000"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
