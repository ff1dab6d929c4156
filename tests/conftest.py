from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager
from typing import Any

import pytest
from fastapi.testclient import TestClient

from core import db
from interns import repository as intern_repository

API_KEY = "test-api-key"


class FakeInternStore:
    """In-memory stand-in for the `interns` table, keyed on intern_id."""

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.upserts = 0
        self.lookups = 0
        self._clock = 0

    async def upsert_intern(self, executor: Any, intern_id: str, fields: dict[str, Any]) -> str:
        self.upserts += 1
        self._clock += 1
        existing = self.rows.get(intern_id)
        if existing is None:
            self.rows[intern_id] = {
                "intern_id": intern_id,
                **fields,
                "created_at": self._clock,
                "updated_at": self._clock,
            }
            return "inserted"
        if all(existing.get(column) == value for column, value in fields.items()):
            return "matched"
        existing.update(fields)
        existing["updated_at"] = self._clock
        return "modified"

    async def get_intern_by_intern_id(self, executor: Any, intern_id: str) -> dict[str, Any] | None:
        self.lookups += 1
        row = self.rows.get(intern_id)
        return dict(row) if row is not None else None


class FakePool:
    def __init__(self) -> None:
        self.acquired = 0

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[object]:
        self.acquired += 1
        yield object()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


@pytest.fixture
def intern_store(monkeypatch: pytest.MonkeyPatch) -> FakeInternStore:
    store = FakeInternStore()
    monkeypatch.setattr(intern_repository, "upsert_intern", store.upsert_intern)
    monkeypatch.setattr(intern_repository, "get_intern_by_intern_id", store.get_intern_by_intern_id)
    return store


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch, fake_pool: FakePool) -> Iterator[Any]:
    monkeypatch.setenv("API_KEY", API_KEY)
    from main import app as fastapi_app

    fastapi_app.dependency_overrides[db.get_pool] = lambda: fake_pool
    try:
        yield fastapi_app
    finally:
        fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app: Any) -> TestClient:
    # Not used as a context manager, so the lifespan (real DB pool) never runs.
    return TestClient(app, headers={"x-api-key": API_KEY})


@pytest.fixture
def anon_client(app: Any) -> TestClient:
    return TestClient(app)
