"""
Database configuration module with async SQLAlchemy engine and session management.

This module provides the database connection, session factory, and utility
functions for database initialization and health checks.
"""
from typing import Any, AsyncGenerator, Dict

import structlog
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy import text

from eshop.core.config import settings
from eshop.models import Base

logger = structlog.get_logger(__name__)


def _engine_options(database_url: str) -> Dict[str, Any]:
    """Build engine keyword arguments; SQLite pools do not accept sizing options."""
    options: Dict[str, Any] = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,  # Verify connections before using them
    }
    if not database_url.startswith("sqlite"):
        options["pool_size"] = settings.database_pool_size
        options["max_overflow"] = settings.database_max_overflow
    return options


# Create async engine
engine: AsyncEngine = create_async_engine(
    settings.database_url,
    **_engine_options(settings.database_url),
)


# Create async session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Better async performance
    autoflush=False,
    autocommit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function that yields AsyncSession instances.

    Use this with FastAPI's Depends() for dependency injection.

    Example:
        @app.get("/genders")
        async def list_genders(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db() -> None:
    """
    Initialize the database by creating all tables.

    NOTE: This is for development only. Schema migrations are managed outside this service.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_db_connection() -> bool:
    """
    Health check function to verify database connectivity.

    Returns:
        bool: True if connection is successful, False otherwise.
    """
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("database_connection_check_failed", error=str(e))
        return False


async def dispose_engine() -> None:
    """
    Dispose of the database engine and close all connections.

    Call this during application shutdown.
    """
    await engine.dispose()
