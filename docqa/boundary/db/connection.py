"""
Database connection management.

Provides async SQLAlchemy engine, session factory and schema creation
for the query counter and query log tables.

Dependencies: sqlalchemy, docqa.configs
System role: Database connection lifecycle management
"""

import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from docqa.boundary.db.base import Base
from docqa.configs.database import DatabaseSettings

logger = logging.getLogger(__name__)


def get_async_engine(settings: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    For file-backed SQLite URLs the parent directory is created first.

    Args:
        settings: Database settings

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine
    """
    url = make_url(settings.url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        settings.url,
        echo=settings.echo_sql,
        pool_pre_ping=True,
    )


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Create async session factory for database operations.

    Args:
        engine: Async engine to bind

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create all registered tables if they do not exist."""
    # Import models so they register with Base.metadata
    from docqa.boundary.db import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"{__name__}:init_models - Tables ensured")
