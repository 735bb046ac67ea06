"""Root conftest: shared test configuration, async DB and FastAPI test client.

Invariants:
    - Tests never reach a real PostgreSQL instance
    - Every test gets a fresh in-memory SQLite database with the schema created
    - get_db dependency overridden to use the test DB
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for a single-table insert
    - ASGITransport does not run the lifespan, so logging/pool setup never runs in tests
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import select  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)

import newsletter.infrastructure.database as db_module  # noqa: E402
from newsletter.db.base import Base  # noqa: E402
from newsletter.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from newsletter.main import app  # noqa: E402
from newsletter.models.subscription import Subscription  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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


@pytest.fixture
def fetch_subscriptions(test_session_factory):
    """Read every stored subscription through a fresh session."""
    async def _fetch() -> list[Subscription]:
        async with test_session_factory() as session:
            result = await session.execute(
                select(Subscription).order_by(Subscription.subscribed_at),
            )
            return list(result.scalars().all())
    return _fetch


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    # Same rollback/close path as production, bound to the test engine
    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
