"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features are not exercised)
    - StaticPool: every session shares the one in-memory connection
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models.book import Book
import app.infrastructure.database as db_module
from app.main import app
from tests.services.book_data import POWER_UP


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


def _build_client(test_engine, test_session_factory, **transport_kwargs):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    return AsyncClient(
        transport=ASGITransport(app=app, **transport_kwargs),
        base_url="http://test",
    )


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    original_manager = db_module.db_manager
    async with _build_client(test_engine, test_session_factory) as c:
        yield c
    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def lenient_client(test_engine, test_session_factory):
    """Client that returns 500 responses instead of re-raising app exceptions."""
    original_manager = db_module.db_manager
    async with _build_client(
        test_engine, test_session_factory, raise_app_exceptions=False,
    ) as c:
        yield c
    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_book(test_db):
    """Insert the Power-Up book directly into the test DB."""
    book = Book(**POWER_UP)
    test_db.add(book)
    await test_db.commit()
    return dict(POWER_UP)
