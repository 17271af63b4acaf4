"""Integration fixtures: real repository and HTTP app on in-memory SQLite.

SQLite has no schemas, so the monitor schema is attached as a second
in-memory database on connect. StaticPool keeps a single shared connection.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.monitor_service.api.dependencies import get_db_session
from src.monitor_service.core.db import get_session
from src.monitor_service.core.security import create_access_token
from src.monitor_service.main import create_app
from src.monitor_service.models import MONITOR_SCHEMA
from src.monitor_service.repositories import MonitorRepository


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory database with the monitor table."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(test_engine.sync_engine, "connect")
    def attach_monitor_schema(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute(f"ATTACH DATABASE ':memory:' AS {MONITOR_SCHEMA}")
        cursor.close()

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    async with get_session(engine) as session:
        yield session


@pytest.fixture
def monitor_repo(db_session: AsyncSession) -> MonitorRepository:
    return MonitorRepository(db_session)


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """HTTP client for the app with sessions bound to the test engine."""
    app = create_app()

    async def _get_test_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _get_test_session
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer token accepted by the mutating endpoints."""
    return {"Authorization": f"Bearer {create_access_token('operator-1')}"}
