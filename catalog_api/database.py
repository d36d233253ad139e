"""
Catalog API — Database Session Management
==========================================

What:  Async SQLAlchemy engine, session factory, FastAPI dependency, and the
       classifier that turns driver errors into typed application errors.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine with connection pooling, provides a session
       dependency that auto-commits on success and auto-rolls-back on error.
Who:   Route handlers receive sessions via FastAPI's dependency injection;
       tests swap the dependency for an in-memory SQLite session.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling Strategy:
    pool_size=20:      Persistent connections for normal load
    max_overflow=10:   Temporary connections for traffic spikes (total max = 30)
    pool_pre_ping:     Validates connections before use (catches stale connections)
    pool_recycle=3600: Recycles connections every hour

    SQLite URLs (local development, tests) get none of these: SQLAlchemy picks
    a SQLite-specific pool that rejects the sizing arguments.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from catalog_api.config import settings

# PostgreSQL SQLSTATE for unique_violation
PG_UNIQUE_VIOLATION = "23505"


def build_engine(database_url: str) -> AsyncEngine:
    """Create the async engine, applying pool settings only where the dialect accepts them."""
    kwargs: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not database_url.startswith("sqlite"):
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(database_url, **kwargs)


# ── Engine & Session Factory ──────────────────────────────────────────────
engine = build_engine(settings.database_url)

# expire_on_commit=False: attributes stay readable after commit, so services
# can serialize the ORM object without triggering a lazy load
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for migrations and
    tests use for create_all().
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handler
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/categories")
        async def list_categories(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Error Classification ──────────────────────────────────────────────────
def is_unique_violation(exc: BaseException) -> bool:
    """
    True when `exc` is an IntegrityError caused by a UNIQUE constraint.

    Checks, in order:
        - PostgreSQL SQLSTATE 23505 (asyncpg adapter exposes `sqlstate`/`pgcode`)
        - SQLite extended error name SQLITE_CONSTRAINT_UNIQUE (Python 3.11+)
        - SQLite message prefix "UNIQUE constraint failed" (older Pythons)

    NOT NULL and foreign key violations are also IntegrityErrors; those are
    server bugs, not client conflicts, so they return False here.
    """
    if not isinstance(exc, IntegrityError):
        return False
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        if getattr(orig, attr, None) == PG_UNIQUE_VIOLATION:
            return True
    if getattr(orig, "sqlite_errorname", None) == "SQLITE_CONSTRAINT_UNIQUE":
        return True
    return "UNIQUE constraint failed" in str(orig)


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Close all pooled connections. Called from the lifespan on shutdown."""
    await engine.dispose()
