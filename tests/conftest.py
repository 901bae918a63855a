"""Shared test fixtures."""

from collections.abc import AsyncIterator

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from bptrack_server.models.base import Base


@pytest.fixture
async def async_engine():
    """Create async SQLite engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign keys for SQLite
    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def async_session(async_engine) -> AsyncIterator[AsyncSession]:
    """Create async session for testing."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest.fixture
async def test_profile(async_session: AsyncSession):
    """Create a test profile."""
    from bptrack_server.schemas.profiles import ProfileCreate
    from bptrack_server.services.profiles import ProfileService

    return await ProfileService(async_session).create_profile(
        ProfileCreate(name="John Doe", gender="male", age=46)
    )


@pytest.fixture
async def test_profile_2(async_session: AsyncSession):
    """Create a second test profile."""
    from bptrack_server.schemas.profiles import ProfileCreate
    from bptrack_server.services.profiles import ProfileService

    return await ProfileService(async_session).create_profile(
        ProfileCreate(name="Mom", gender="female", age=73)
    )


# =============================================================================
# Reading Data Fixtures
# =============================================================================


@pytest.fixture
async def profile_with_30d(async_session: AsyncSession, test_profile):
    """Test profile with two readings a day for 30 days before NOW."""
    from tests.fixtures.reading_seed import NOW, seed_readings

    readings = await seed_readings(
        session=async_session,
        profile_id=test_profile.id,
        days=30,
        end=NOW,
    )
    return test_profile, readings
