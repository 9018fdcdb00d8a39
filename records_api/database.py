"""
Records API - Database Session Management
=========================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       FastAPI dependency that hands each request its own session.
How:   One process-wide engine owns the connection pool. Every request gets
       a session that commits on success and rolls back on error.
Who:   Route handlers receive the session via Depends(get_db_session) and
       pass it to the services. Tests swap it out through
       app.dependency_overrides.
When:  Engine is created at module import (no connection is opened until the
       first query); sessions are created per request.

Connection Pooling Strategy:
    pool_size / max_overflow:  Sized from settings (server databases only)
    pool_pre_ping:             Replaces connections that died while idle, so a
                               restarted database is reconnected lazily
    pool_recycle=3600:         Recycles connections every hour
"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from records_api.config import settings

logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    """Builds create_async_engine keyword arguments for the configured URL."""
    options: Dict[str, Any] = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        # SQLite uses a static/single-file pool that rejects sizing arguments
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: records stay readable after the request commits
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All record models inherit from this class so they share one metadata
    object, used both by init_models() and by Alembic autogenerate.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (the service performs queries)
        3. On success: commits the transaction
        4. On error: rolls back, so a multi-step operation such as the
           author/book cascade never half-applies
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/authors")
        async def list_authors(db: AsyncSession = Depends(get_db_session)):
            return await author_service.list_authors(db)
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


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def init_models() -> None:
    """
    Create any missing tables for the registered models.

    Called from the application lifespan when DB_AUTO_CREATE is on.
    Existing tables are left untouched (CREATE TABLE IF NOT EXISTS semantics).
    """
    # Registers every model on Base.metadata
    import records_api.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables verified")


async def check_connection() -> bool:
    """Runs SELECT 1 against the pool. Used by the health check."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("Database unreachable: %s", str(e))
        return False


async def dispose_engine() -> None:
    """
    Gracefully closes all connections in the pool.
    Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
