"""
Ride Service: Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (all function-scoped):
    ├── db_engine:         Fresh in-memory SQLite engine with the schema created
    ├── db_session:        AsyncSession bound to db_engine
    ├── mock_db_session:   AsyncMock session for error-path tests
    ├── ride_payload:      A valid POST /rides body
    └── test_client:       HTTPX AsyncClient talking to a fresh app over ASGI,
                           with get_db_session pointed at db_engine
"""

import os

# Override settings BEFORE any ride_service import reads them
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RIDES_PAGE_SIZE"] = "10"

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ride_service.database import engine_options, get_db_session, init_schema  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    A private in-memory database per test.

    StaticPool (from engine_options) keeps the single connection alive, so
    the table created here is visible to every session on this engine.
    """
    engine = create_async_engine(TEST_DATABASE_URL, **engine_options(TEST_DATABASE_URL))
    await init_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    A MagicMock that simulates AsyncSession behavior.

    Usage:
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        with pytest.raises(DatabaseError):
            await service.list_rides(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def ride_payload():
    """The valid ride body used throughout the API contract."""
    return {
        "start_lat": 1,
        "start_long": 2,
        "end_lat": 3,
        "end_long": 4,
        "rider_name": "test",
        "driver_name": "test",
        "driver_vehicle": "test",
    }


@pytest_asyncio.fixture
async def test_client(db_engine) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient configured to talk to a fresh FastAPI app.

    ASGITransport does not run the lifespan, so the schema comes from the
    db_engine fixture. The session dependency mirrors get_db_session
    (commit on success, rollback on error) against the test engine.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from ride_service.main import create_app

    app = create_app()
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
