"""
Environment-backed settings.

Every value is read on demand so tests can monkeypatch the environment.
"""

from __future__ import annotations

import os

DEFAULT_SITE_URL = "https://accelrix-buildbeyond.web.app"


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw not in {"0", "false", "no", "off"}


def api_key() -> str:
    return env_str("API_KEY")


def cors_allow_origins() -> list[str]:
    raw = env_str("CORS_ALLOW_ORIGINS", DEFAULT_SITE_URL)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def site_url() -> str:
    return env_str("SITE_URL", DEFAULT_SITE_URL)


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def port() -> int:
    return env_int("PORT", 5000)
