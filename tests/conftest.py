"""Test configuration and fixtures."""

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from healthcheck.core.health_reporter import HealthReporter
from healthcheck.main import app
from healthcheck.routes.health import get_health_reporter

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def mock_logger() -> MagicMock:
    """Create mock structured logger."""
    return MagicMock()


@pytest.fixture
def mock_connection() -> AsyncMock:
    """Create mock database connection that answers pings."""
    connection = AsyncMock()
    connection.ping = AsyncMock(return_value=None)
    connection.close = AsyncMock(return_value=None)
    return connection


@pytest.fixture
def mock_db(mock_connection: AsyncMock) -> AsyncMock:
    """Create mock database handle returning ``mock_connection``."""
    db = AsyncMock()
    db.acquire = AsyncMock(return_value=mock_connection)
    return db


@pytest.fixture
def reporter(mock_logger: MagicMock, mock_db: AsyncMock) -> HealthReporter:
    """Create HealthReporter over mocks."""
    return HealthReporter(logger=mock_logger, db=mock_db)


@pytest_asyncio.fixture
async def client(reporter: HealthReporter) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with the health reporter overridden."""
    app.dependency_overrides[get_health_reporter] = lambda: reporter

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    yield engine

    await engine.dispose()
