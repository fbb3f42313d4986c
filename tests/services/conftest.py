"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - File-backed SQLite over :memory: so two sessions really are two
      connections (needed to provoke concurrency conflicts)
    - Engine built through build_engine(): same case-sensitive LIKE pragma as production
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from httpx import ASGITransport, AsyncClient

import catalog_api.models  # noqa: F401
from catalog_api.db.base import Base
from catalog_api.infrastructure.database import (
    DatabaseSessionManager, build_engine, get_db,
)
import catalog_api.infrastructure.database as db_module
from catalog_api.main import app
from catalog_api.models.category import Category
from catalog_api.models.product import Product


@pytest.fixture
async def test_engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
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


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def seed_categories(test_session_factory):
    """Insert categories directly; returns them in insertion order."""
    async def _seed(*specs):
        rows = [
            Category(name=s, is_deleted=False) if isinstance(s, str)
            else Category(**s)
            for s in specs
        ]
        async with test_session_factory() as db:
            db.add_all(rows)
            await db.commit()
        return rows
    return _seed


@pytest.fixture
def seed_products(test_session_factory):
    """Insert products directly from dicts; returns them in insertion order."""
    async def _seed(*specs):
        rows = [Product(**{"is_deleted": False, **s}) for s in specs]
        async with test_session_factory() as db:
            db.add_all(rows)
            await db.commit()
        return rows
    return _seed
