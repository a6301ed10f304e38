"""
Database failure mapping: pool/connection failures answer 503, any other
SQLAlchemy error answers 500, and neither escapes as an unhandled crash.
"""
import logging
import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError, ProgrammingError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from bulletin.database import get_db
from bulletin.main import app


class _FailingSession:
    """Stands in for an AsyncSession whose every statement raises *exc*."""

    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    def add(self, obj) -> None:
        pass

    async def execute(self, *args, **kwargs):
        raise self._exc

    async def get(self, *args, **kwargs):
        raise self._exc

    async def flush(self) -> None:
        raise self._exc


def _failing_db(exc: Exception):
    async def _override():
        yield _FailingSession(exc)
    return _override


@pytest.fixture
def fail_with(monkeypatch):
    def _apply(exc: Exception) -> None:
        monkeypatch.setitem(app.dependency_overrides, get_db, _failing_db(exc))
    return _apply


@pytest.mark.asyncio
async def test_pool_timeout_returns_503(async_client: AsyncClient, fail_with):
    fail_with(PoolTimeoutError("QueuePool limit of size 5 overflow 10 reached"))
    resp = await async_client.get("/post/list_posts")
    assert resp.status_code == 503
    assert resp.json() == {"detail": "Database unavailable"}


@pytest.mark.asyncio
async def test_connection_refused_returns_503(async_client: AsyncClient, fail_with):
    """asyncpg surfaces a refused connect as a bare ConnectionRefusedError."""
    fail_with(ConnectionRefusedError(111, "Connect call failed ('127.0.0.1', 5432)"))
    resp = await async_client.get("/api/events")
    assert resp.status_code == 503
    assert resp.json() == {"detail": "Database unavailable"}


@pytest.mark.asyncio
async def test_connect_timeout_returns_503(async_client: AsyncClient, fail_with):
    fail_with(TimeoutError())
    resp = await async_client.get("/post/list_all_posts")
    assert resp.status_code == 503


@pytest.mark.asyncio
async def test_wrapped_operational_error_returns_503(async_client: AsyncClient, fail_with):
    fail_with(OperationalError("SELECT 1", {}, Exception("server closed the connection")))
    resp = await async_client.get("/api/events")
    assert resp.status_code == 503


@pytest.mark.asyncio
async def test_unreachable_postgres_returns_503(async_client: AsyncClient, monkeypatch, caplog):
    """A real asyncpg pool pointed at a closed port answers 503 and logs why."""
    engine = create_async_engine("postgresql+asyncpg://u:p@127.0.0.1:1/x", pool_timeout=2)
    sessions = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _unreachable_db():
        async with sessions() as session:
            yield session

    monkeypatch.setitem(app.dependency_overrides, get_db, _unreachable_db)
    caplog.set_level(logging.ERROR, logger="bulletin.errors")
    try:
        resp = await async_client.get("/post/list_posts")
    finally:
        await engine.dispose()

    assert resp.status_code == 503
    assert any(
        r.getMessage() == "Database unavailable during GET /post/list_posts" for r in caplog.records
    )


@pytest.mark.asyncio
async def test_query_failure_returns_500_for_posts(async_client: AsyncClient, fail_with):
    fail_with(ProgrammingError("UPDATE articles", {}, Exception("boom")))
    resp = await async_client.delete(f"/post/remove_post/{uuid.uuid4()}")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal Server Error"}


@pytest.mark.asyncio
async def test_query_failure_returns_500_for_event_create(async_client: AsyncClient, fail_with, event_payload):
    fail_with(ProgrammingError("INSERT INTO events", {}, Exception("boom")))
    resp = await async_client.post("/api/event", json=event_payload)
    assert resp.status_code == 500


@pytest.mark.asyncio
async def test_override_restored_after_failure_tests(async_client: AsyncClient):
    resp = await async_client.get("/post/list_posts")
    assert resp.status_code == 200
