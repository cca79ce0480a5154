"""Shared fixtures: an in-memory stand-in for the asyncpg pool."""

from contextlib import asynccontextmanager
from typing import Any

import pytest
import structlog

from src.db import postgres


class FakeConnection:
    """Records queries and replays canned results."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self.row: dict[str, Any] | None = None
        self.rows: list[dict[str, Any]] = []
        self.value: Any = None
        self.error: Exception | None = None

    def _record(self, method: str, sql: str, args: tuple[Any, ...]) -> None:
        self.calls.append((method, sql, args))
        if self.error is not None:
            raise self.error

    async def fetchrow(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self._record("fetchrow", sql, args)
        return self.row

    async def fetch(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self._record("fetch", sql, args)
        return self.rows

    async def fetchval(self, sql: str, *args: Any) -> Any:
        self._record("fetchval", sql, args)
        return self.value


class FakePool:
    def __init__(self, conn: FakeConnection) -> None:
        self.conn = conn
        self.closed = False

    @asynccontextmanager
    async def acquire(self):
        yield self.conn

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_conn(monkeypatch: pytest.MonkeyPatch) -> FakeConnection:
    """Install a fake pool as the shared pool and return its connection."""
    conn = FakeConnection()
    monkeypatch.setattr(postgres, "_pool", FakePool(conn))
    return conn


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()
