from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    api_base_url: str
    api_timeout_s: float
    session_db_path: str
    session_storage_key: str
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]


settings = Settings(
    api_base_url=(_get_env("RESUMEAI_API_BASE_URL", "http://localhost:8000") or "http://localhost:8000").rstrip("/"),
    api_timeout_s=_get_env_float("RESUMEAI_API_TIMEOUT_S", 60.0),
    session_db_path=_get_env("RESUMEAI_SESSION_DB_PATH", "data/session.db") or "data/session.db",
    session_storage_key=_get_env("RESUMEAI_SESSION_KEY", "resumeai_user") or "resumeai_user",
    rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ],
    ),
)

if settings.api_timeout_s <= 0:
    raise RuntimeError("RESUMEAI_API_TIMEOUT_S must be a positive number of seconds.")
