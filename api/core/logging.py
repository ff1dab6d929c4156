"""Process-wide logging setup."""

from __future__ import annotations

import logging

from . import settings


def configure_logging(*, level: str | None = None, force: bool = False) -> None:
    """
    Initialise the root logger once.

    Level defaults to LOG_LEVEL. Pass ``force=True`` to reconfigure in tests.
    """
    logging.basicConfig(
        level=(level or settings.log_level()),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        force=force,
    )
