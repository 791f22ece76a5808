import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import retail_planner.db.models  # noqa: F401
from retail_planner.db.base import Base, get_db
from retail_planner.server import app


@pytest.fixture
def session_factory(tmp_path):
    """Async sessions on a throwaway SQLite file with the full schema."""
    # NullPool: every event loop (TestClient, asyncio.run) opens its own connection
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'planning.db'}",
        poolclass=NullPool,
    )

    async def create_all():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_all())
    yield async_sessionmaker(engine, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def override_db(session_factory):
    """Point the app's get_db dependency at the test database."""
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_db):
    with TestClient(override_db) as test_client:
        yield test_client


@pytest.fixture
def seed(session_factory):
    """Insert ORM rows directly, bypassing the API."""
    def _seed(*rows):
        async def add_all():
            async with session_factory() as session:
                session.add_all(rows)
                await session.commit()

        asyncio.run(add_all())

    return _seed
