"""
Pets API — Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set BEFORE pets_api is imported so the
       settings singleton and the engine never point at a real PostgreSQL.

Fixtures:
    memory_repository: Fresh InMemoryPetRepository per test
    mock_repository:   AsyncMock honoring the PetRepository interface
    mock_db_session:   AsyncMock standing in for an AsyncSession
    sqlite_sessions:   async_sessionmaker over an in-memory SQLite database
                       with the `pets` table created
    test_client:       HTTPX AsyncClient, API backed by memory_repository
    sql_client:        HTTPX AsyncClient, API backed by SQLite through
                       SqlAlchemyPetRepository
"""

import os
import tempfile

# Override settings for testing BEFORE any app imports
os.environ["APP_ENV"] = "development"
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="pets_api_test_"), "test.db")
)
os.environ["STORAGE_BACKEND"] = "sqlalchemy"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pets_api.database import Base  # noqa: E402
from pets_api.dependencies import get_pet_repository  # noqa: E402
from pets_api.models.pet import Pet  # noqa: E402,F401
from pets_api.repositories.base import PetRepository  # noqa: E402
from pets_api.repositories.memory_repository import InMemoryPetRepository  # noqa: E402
from pets_api.repositories.sqlalchemy_repository import SqlAlchemyPetRepository  # noqa: E402


@pytest.fixture
def memory_repository():
    return InMemoryPetRepository()


@pytest.fixture
def mock_repository():
    """
    AsyncMock with the PetRepository spec.

    Usage:
        mock_repository.exists_by_id.return_value = False
        ...
        mock_repository.delete_by_id.assert_not_awaited()
    """
    return AsyncMock(spec=PetRepository)


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = SQLAlchemyError("boom")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def sqlite_sessions():
    """
    In-memory SQLite database with the real `pets` table.

    The aiosqlite dialect shares one connection for `:memory:` URLs, so every
    session from the returned factory sees the same data.
    """
    engine = create_async_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    yield factory
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(memory_repository):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    The store is swapped for `memory_repository`, so tests can seed or
    inspect it directly.
    """
    from pets_api.main import app

    app.dependency_overrides[get_pet_repository] = lambda: memory_repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sql_client(sqlite_sessions):
    """
    HTTPX AsyncClient with the SQLAlchemy store over in-memory SQLite.

    Each request gets its own session, committed on success and rolled back
    on error, mirroring session_scope().
    """
    from pets_api.main import app

    async def sqlite_repository():
        async with sqlite_sessions() as session:
            try:
                yield SqlAlchemyPetRepository(session)
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_pet_repository] = sqlite_repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
