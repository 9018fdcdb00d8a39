"""
Records API - Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── test_engine: Fresh in-memory SQLite database with all tables
    ├── test_session_factory / test_db: Sessions bound to test_engine
    ├── app: Application from create_app() with get_db_session overridden
    └── client: HTTPX AsyncClient talking to `app` over ASGITransport
"""

import os

# Override settings for testing BEFORE any application imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_AUTO_CREATE"] = "false"
os.environ.pop("ENABLED_RESOURCES", None)

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import records_api.models  # noqa: E402,F401
from records_api.database import Base, get_db_session  # noqa: E402
from records_api.main import create_app  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_delete(mock_db_session):
            mock_db_session.get.return_value = None
            with pytest.raises(NotFoundError):
                await author_service.delete_author(mock_db_session, str(uuid4()))
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def test_engine():
    """
    In-memory SQLite database, created fresh for each test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_db(test_session_factory):
    """A session for seeding and inspecting the test database directly."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def app(test_session_factory):
    """Full application (all resources) bound to the test database."""
    application = create_app()

    async def override_get_db_session():
        async with test_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_get_db_session
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    """
    HTTPX AsyncClient configured to talk to the FastAPI app.

    Usage:
        async def test_list(client):
            response = await client.get("/api/authors")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def author(client):
    """An author created through the API; returns the response `data`."""
    response = await client.post("/api/author", json={"name": "Ursula K. Le Guin"})
    assert response.status_code == 200
    return response.json()["data"]
