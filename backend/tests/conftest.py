"""
OrderDesk Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession (no database needed)
    ├── database: Real connection pool over a temporary SQLite file,
    │             schema created, foreign keys enforced
    ├── seeded_db: `database` plus two products and two customers
    └── test_client: HTTPX AsyncClient talking to the app in-process

ASGITransport does not run the app lifespan, so endpoint tests request the
`database` fixture to create the pool the way startup would.
"""

import os
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

# Must be set before any orderdesk import reads settings
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("DATABASE_URL", None)

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.engine import Engine

from orderdesk import database as db_module
from orderdesk.database import Base, dispose_engine, init_engine
from orderdesk.models.customer import Customer
from orderdesk.models.order import Order  # noqa: F401
from orderdesk.models.product import Product


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores REFERENCES unless this pragma is on for the connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value.scalars.return_value.all.return_value = rows
            result = await product_service.list_products(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sqlite_url(tmp_path):
    """URL of a fresh SQLite file for this test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'orderdesk_test.db'}"


@pytest_asyncio.fixture
async def database(sqlite_url):
    """
    Creates the shared pool exactly as startup does, plus the schema.

    Yields the published AsyncEngine; disposes it afterwards so the next
    test starts with no pool.
    """
    engine = await init_engine(sqlite_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await dispose_engine()


@pytest_asyncio.fixture
async def seeded_db(database):
    """
    Seeds two products and two customers.

    Returns a dict with the inserted ids:
        {"products": {name: id}, "customers": {name: id}}
    """
    products = {"Widget": uuid4(), "Gadget": uuid4()}
    customers = {"Alice": uuid4(), "Bob": uuid4()}

    async with db_module.async_session_factory() as session:
        for name, pid in products.items():
            session.add(Product(id=pid, name=name))
        for name, cid in customers.items():
            session.add(Customer(id=cid, name=name))
        await session.commit()

    return {"products": products, "customers": customers}


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client, database):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from orderdesk.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
