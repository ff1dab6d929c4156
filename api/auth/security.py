"""
API-key helpers.
"""

from __future__ import annotations

import secrets

from core import settings

API_KEY_HEADER = "x-api-key"


class AuthConfigError(RuntimeError):
    pass


def configured_api_key() -> str:
    key = settings.api_key()
    if not key:
        raise AuthConfigError("API_KEY is not set.")
    return key


def api_key_matches(presented: str, expected: str) -> bool:
    # Constant-time comparison; lengths may differ.
    return secrets.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))
