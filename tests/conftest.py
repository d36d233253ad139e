"""
Catalog API — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Reusable infrastructure: mocked sessions for service unit tests, and a
       real in-memory SQLite database behind the HTTP API for end-to-end tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: AsyncMock session (no database at all)
    ├── db_engine:       in-memory SQLite engine with every table created
    ├── app:             fresh FastAPI app whose session dependency uses db_engine
    └── client:          HTTPX AsyncClient talking to `app` in-process
"""

import os

# Settings are read at import time: configure the environment BEFORE any
# catalog_api import, so tests never touch a real database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_REQUESTS"] = "10000"

from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import catalog_api.models  # noqa: F401  (registers tables on Base.metadata)
from catalog_api.database import Base, get_db_session
from catalog_api.main import create_app


# ══════════════════════════════════════════════════════════════════════════
# Service Unit Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
        result = await category_service.get(mock_db_session, "some-id")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def assign_defaults(mock_db_session):
    """
    Make mock flush() behave like a real INSERT: fill id and timestamps on the
    object most recently passed to session.add().
    """
    async def flush():
        if not mock_db_session.add.call_args:
            return
        obj = mock_db_session.add.call_args[0][0]
        now = datetime.now(timezone.utc)
        obj.id = obj.id or "generated-id"
        obj.created_at = obj.created_at or now
        obj.updated_at = obj.updated_at or now
        for column in obj.__table__.columns:
            if getattr(obj, column.key) is None and column.default is not None:
                default = column.default.arg
                if not callable(default):
                    setattr(obj, column.key, default)

    mock_db_session.flush = AsyncMock(side_effect=flush)
    return mock_db_session


# ══════════════════════════════════════════════════════════════════════════
# End-to-End Fixtures (real SQLite, real HTTP stack)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite with the full schema.

    StaticPool keeps ONE connection for the engine's lifetime; without it
    every new connection would open a different, empty in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def app(db_engine):
    """Fresh app per test (fresh rate-limit state) wired to the test database."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application = create_app()
    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest_asyncio.fixture
async def client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_health(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
