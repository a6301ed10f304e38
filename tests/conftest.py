"""
Test infrastructure for the Bulletin API.

Strategy
--------
- SQLite in-memory via aiosqlite removes the need for a running Postgres
  instance, keeping the suite fast and self-contained.
- StaticPool makes every async task share the same in-memory connection;
  SQLite in-memory databases are connection-scoped, so a second connection
  would see an empty database.
- The app's get_db dependency is overridden so every request uses the test
  session factory rather than the production pool.
- Tables are created before each test and dropped after, giving each test a
  clean, isolated state.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from bulletin.database import Base, get_db
from bulletin.main import app
from bulletin.middleware import install_query_counter

# ---------------------------------------------------------------------------
# Test database engine: SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Dependency override: replace production get_db with the test session factory
# ---------------------------------------------------------------------------

async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """A live AsyncSession for tests that call service functions directly."""
    async with async_session_test() as session:
        yield session


@pytest.fixture
def session_factory() -> async_sessionmaker:
    """The test session factory, for code that opens its own sessions."""
    return async_session_test


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """An httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def event_payload() -> dict:
    return {
        "title": "PyCon Sprint",
        "description": "Two days of contributing to open source.",
        "location": "Lisbon",
        "starts_at": "2026-11-20T09:00:00",
    }
