"""Litestar application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from advanced_alchemy.extensions.litestar import (
    AsyncSessionConfig,
    SQLAlchemyAsyncConfig,
    SQLAlchemyPlugin,
)
from litestar import Litestar
from litestar.config.cors import CORSConfig
from litestar.datastructures import State
from litestar.openapi import OpenAPIConfig
from sqlalchemy.ext.asyncio import AsyncEngine

from bptrack_server import __version__
from bptrack_server.api import api_routers
from bptrack_server.core.config import settings
from bptrack_server.core.database import close_database, engine, init_database

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: Litestar) -> AsyncIterator[None]:
    """Application lifespan manager.

    Handles startup and shutdown tasks:
    - Check database migrations on startup
    - Close database connections on shutdown
    """
    db_engine: AsyncEngine = app.state.database_engine

    logger.info("Starting bptrack-server", version=__version__)

    await init_database(db_engine)
    logger.info("Database initialized")

    yield

    await close_database(db_engine)
    logger.info("Shutdown complete")


def create_app(engine_instance: AsyncEngine | None = None) -> Litestar:
    """Create Litestar application.

    Args:
        engine_instance: Database engine to use (defaults to the global engine)

    Returns:
        Configured Litestar app instance
    """
    db_engine = engine_instance or engine

    return Litestar(
        route_handlers=api_routers,
        lifespan=[lifespan],
        state=State({"database_engine": db_engine}),
        openapi_config=OpenAPIConfig(
            title="bptrack-server API",
            version=__version__,
            description="Blood pressure tracking with ACC/AHA 2017 classification",
        ),
        plugins=[
            SQLAlchemyPlugin(
                config=SQLAlchemyAsyncConfig(
                    engine_instance=db_engine,
                    session_dependency_key="session",
                    session_config=AsyncSessionConfig(expire_on_commit=False),
                ),
            ),
        ],
        cors_config=CORSConfig(allow_origins=settings.cors_allowed_origins),
        debug=settings.log_level == "DEBUG",
    )


# Application instance
app = create_app()
