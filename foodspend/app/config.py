from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()

DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]


@dataclass
class Settings:
    database_url: Optional[str]
    host: str
    port: int
    summary_scheduler_enabled: bool
    log_level: str
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))



def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _cors_origins() -> List[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS")
    if raw is None:
        return list(DEFAULT_CORS_ORIGINS)
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    if not origins:
        raise RuntimeError("CORS_ALLOW_ORIGINS must not be empty.")
    return origins


def get_settings() -> Settings:
    raw_port = os.getenv("PORT", "") or "3000"
    try:
        port = int(raw_port)
    except ValueError:
        port = 3000

    database_url = (os.getenv("DATABASE_URL") or "").strip() or None

    return Settings(
        database_url=database_url,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        summary_scheduler_enabled=_parse_bool(os.getenv("SUMMARY_SCHEDULER_ENABLED"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_cors_origins(),
    )
