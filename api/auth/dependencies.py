"""
Auth dependencies for protected FastAPI routes.

Every gated route declares `Depends(require_api_key)`. A missing header is
401, a wrong key is 403.
"""

from __future__ import annotations

import logging

from fastapi import Header, HTTPException, status

from core.errors import GENERIC_ERROR_MESSAGE

from . import security

logger = logging.getLogger(__name__)


def _check_api_key(presented: str | None) -> None:
    raw = (presented or "").strip()
    if not raw:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key.",
        )

    try:
        expected = security.configured_api_key()
    except security.AuthConfigError:
        logger.error("api_key_not_configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=GENERIC_ERROR_MESSAGE,
        )

    if not security.api_key_matches(raw, expected):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid API key.",
        )


async def require_api_key(
    x_api_key: str | None = Header(default=None, alias=security.API_KEY_HEADER),
) -> None:
    _check_api_key(x_api_key)
