"""Database initialization and session management."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from bptrack_server.core.config import settings

logger = logging.getLogger(__name__)


def create_engine(database_url: str | None = None) -> AsyncEngine:
    """Create the async database engine.

    Args:
        database_url: Override for settings.database_url

    Returns:
        Async SQLAlchemy engine
    """
    url = database_url or settings.database_url
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=False)

    return create_async_engine(
        url,
        echo=False,
        pool_size=10,
        max_overflow=20,
        pool_recycle=300,  # Recycle connections every 5 minutes
    )


# Global engine and session maker
engine = create_engine()
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_database(db_engine: AsyncEngine | None = None) -> None:
    """Verify database is ready and migrations have been applied.

    Does NOT create tables - use Alembic migrations for schema management.

    Args:
        db_engine: Engine to check (defaults to the global engine)
    """
    db_engine = db_engine or engine

    async with db_engine.connect() as conn:
        has_migrations = await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).has_table("alembic_version")
        )

        if not has_migrations:
            logger.warning(
                "Database migrations have not been applied. "
                "Run 'alembic upgrade head' to initialize the database schema."
            )
        else:
            result = await conn.execute(text("SELECT version_num FROM alembic_version"))
            version = result.scalar()
            logger.info(f"Database initialized with migration version: {version}")


@asynccontextmanager
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session.

    Usage:
        async with get_session() as session:
            result = await session.execute(select(Profile))
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def close_database(db_engine: AsyncEngine | None = None) -> None:
    """Close database connection pool."""
    await (db_engine or engine).dispose()
