"""Integration test fixtures for database and HTTP client operations.

Each test gets its own migrated SQLite file under ``tmp_path``.
"""

import asyncio
from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.plantcare.api.dependencies import get_now
from src.plantcare.core.config import Settings
from src.plantcare.core.db import create_engine, dispose_engine, run_migrations_sync
from src.plantcare.main import create_app
from src.plantcare.repositories import PlantRepository
from tests.helpers import NOW


@pytest.fixture
def care_timezone() -> str:
    """Override in a test module to count calendar days in another zone."""
    return "UTC"


@pytest.fixture
def settings(tmp_path, care_timezone: str) -> Settings:
    return Settings(
        app_env="testing",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'plants.sqlite'}",
        run_migrations_on_startup=False,
        care_timezone=care_timezone,
    )


@pytest.fixture
async def engine(settings: Settings) -> AsyncGenerator[AsyncEngine]:
    """Migrated database engine with the schedule function registered."""
    await asyncio.to_thread(run_migrations_sync, settings.database_url)
    test_engine = create_engine(settings)
    yield test_engine
    await dispose_engine(test_engine)


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Database session for direct data setup and assertions.

    Tests must call ``await db_session.commit()`` for data to be visible
    to the HTTP client.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def plant_repo(db_session: AsyncSession) -> PlantRepository:
    return PlantRepository(db_session)


@pytest.fixture
def app(settings: Settings, engine: AsyncEngine) -> FastAPI:
    """Application bound to the test engine with the clock pinned to NOW."""
    test_app = create_app(settings, engine)
    test_app.dependency_overrides[get_now] = lambda: NOW
    return test_app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client for the application (lifespan is not run)."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
