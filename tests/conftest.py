"""
Shared test fixtures and configuration for the test suite.

Provides: in-memory SQLite async database, ASGI client for the catalog API
"""
import os

# Settings are read at import time; point them at SQLite before eshop is imported.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "console")

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from eshop.models import Base, CatalogGender


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite engine with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """
    Provide a session bound to the in-memory database.

    Yields:
        AsyncSession rolled back after the test
    """
    session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def seeded_genders(db_session):
    """Insert a few catalog genders and return them in id order."""
    genders = [CatalogGender(gender=name) for name in ("Women", "Men", "Unisex")]
    db_session.add_all(genders)
    await db_session.flush()
    return genders


@pytest.fixture
def catalog_app(db_session):
    """Catalog FastAPI app with get_db overridden to the test session."""
    from eshop.database import get_db
    from eshop.main import app

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def api_client(catalog_app):
    """httpx client talking to the catalog app in-process."""
    transport = httpx.ASGITransport(app=catalog_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://catalog") as client:
        yield client
