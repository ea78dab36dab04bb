"""
OrderDesk Backend - Connection Pool & Session Management
==========================================================

What:  Async SQLAlchemy engine (the connection pool), session factory, and
       the FastAPI session dependency.
How:   The engine is created once during startup by `init_engine()`, which
       proves the store is reachable before publishing the engine as the
       process-wide handle. Every request borrows a session from the shared
       factory; the session checks a connection out of the pool on first use
       and returns it when closed.
Who:   `init_engine()`/`dispose_engine()` are called by the app lifespan;
       `get_db_session()` is injected into route handlers via Depends().

Connection Pooling:
    pool_size=5 (settings.db_pool_size), max_overflow=0:
        At most 5 connections are open at any time. A sixth concurrent
        request waits in the pool's checkout queue until one is returned.
    pool_pre_ping:
        Validates connections before use (catches stale connections).

    Checkout, checkin and queueing are handled entirely by SQLAlchemy's pool;
    this module adds no locking of its own.
"""

import logging
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from orderdesk.config import settings
from orderdesk.exceptions import DatabaseUnavailableError

logger = logging.getLogger(__name__)


# ── Process-wide Handle ───────────────────────────────────────────────────
# Populated by init_engine() at startup, cleared by dispose_engine()
engine: Optional[AsyncEngine] = None
async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class to register with a single metadata
    object (used by the test suite to create the schema).
    """
    pass


# ── Engine Construction ───────────────────────────────────────────────────
def build_engine(database_url: str) -> AsyncEngine:
    """
    Create an async engine with a bounded connection pool.

    No connection is opened here; SQLAlchemy connects lazily.
    """
    return create_async_engine(
        database_url,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_pre_ping=settings.db_pool_pre_ping,
        # Echo SQL queries in DEBUG mode for development visibility
        echo=settings.log_level == "DEBUG",
    )


async def init_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create the shared connection pool and verify the store is reachable.

    What:    Builds the engine, opens one connection and runs SELECT 1.
    When:    Exactly once, during application startup.

    Args:
        database_url: Overrides settings.database_url (used by tests).

    Returns:
        The published AsyncEngine.

    Raises:
        DatabaseUnavailableError: No URL was configured or the initial
            connection failed. Callers treat this as fatal; there is no retry.
    """
    global engine, async_session_factory

    url = database_url or settings.database_url
    if not url:
        raise DatabaseUnavailableError(message="DATABASE_URL must be set")

    candidate = build_engine(url)
    try:
        async with candidate.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        await candidate.dispose()
        logger.error("Failed to create database connection pool: %s", str(e))
        raise DatabaseUnavailableError(
            message=f"Failed to create database connection pool: {e}",
            context={"error_type": type(e).__name__},
        ) from e

    engine = candidate
    # expire_on_commit=False: returned rows stay readable after commit
    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    logger.info(
        "Database connection pool ready (max %d connections)", settings.db_pool_size
    )
    return engine


def get_engine() -> AsyncEngine:
    """Return the shared engine, or raise if startup has not created it."""
    if engine is None:
        raise DatabaseUnavailableError(message="Database connection pool is not initialized")
    return engine


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the shared factory
        2. Yields it to the route handler (the handler performs its statement)
        3. On success: commits the transaction
        4. On error: rolls back the transaction
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        async def list_products(db: AsyncSession = Depends(get_db_session)):
            return await product_service.list_products(db)

    Raises:
        DatabaseUnavailableError: The pool was never initialized.
        Exceptions raised by the handler are re-raised after rollback so the
        global error handlers can respond.
    """
    if async_session_factory is None:
        raise DatabaseUnavailableError(message="Database connection pool is not initialized")

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
async def dispose_engine() -> None:
    """
    What:  Closes all connections in the pool and clears the shared handle.
    When:  Called during application shutdown (lifespan handler).
    """
    global engine, async_session_factory

    if engine is not None:
        await engine.dispose()
    engine = None
    async_session_factory = None
