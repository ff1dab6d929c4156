"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). Route handlers receive the pool
through the `get_pool` dependency and pass it down to services.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import settings

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")

# Anything that can run a statement: the pool itself or an acquired connection.
Executor = Union[asyncpg.Pool, asyncpg.Connection]

# Errors meaning "the store could not serve this request".
STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)

_pool: asyncpg.Pool | None = None


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = settings.env_str("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.env_int("DB_POOL_MIN_SIZE", 1),
        max_size=settings.env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=settings.env_int("DB_COMMAND_TIMEOUT_S", 30),
    )
    logger.info("db_pool_ready")


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def get_pool() -> asyncpg.Pool:
    """
    FastAPI dependency handing the process-wide pool to a route.
    """
    return pool()


async def ensure_schema(executor: Executor) -> None:
    """
    Apply `schema.sql`. Every statement in it is idempotent.
    """
    await execute(executor, SCHEMA_PATH.read_text(encoding="utf-8"))


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(executor: Executor, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await executor.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def execute(executor: Executor, sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    await executor.execute(sql, *args)
