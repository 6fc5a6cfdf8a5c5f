from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Core/runtime
    db_path: str
    run_env: str
    log_level: str

    # Single-tenant demo: every record belongs to this user id
    owner_user_id: int

    # Uploads
    upload_max_bytes: int

    # HTTP server
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # Feature flags
    demo: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    upload_max_bytes = int(os.getenv("UPLOAD_MAX_BYTES", str(5 * 1024 * 1024)))
    if upload_max_bytes <= 0:
        raise RuntimeError("UPLOAD_MAX_BYTES must be a positive number of bytes")
    owner_user_id = int(os.getenv("OWNER_USER_ID", "1"))
    if owner_user_id <= 0:
        raise RuntimeError("OWNER_USER_ID must be a positive integer")
    return Settings(
        db_path=os.getenv("DB_PATH", "career.db"),
        run_env=os.getenv("RUN_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        owner_user_id=owner_user_id,
        upload_max_bytes=upload_max_bytes,
        api_host=os.getenv("API_HOST", "127.0.0.1"),
        api_port=int(os.getenv("API_PORT", "8000")),
        demo=_as_bool(os.getenv("DEMO", "false")),
    )
