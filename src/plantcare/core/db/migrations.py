"""Reusable migration runner for both production and tests."""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from alembic.config import Config

from alembic import command
from src.plantcare.core.db.engine import ensure_sqlite_directory

MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "alembic"


def build_alembic_config(database_url: str) -> Config:
    """Build an Alembic config pointing at the bundled migration scripts."""
    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    # ConfigParser interpolation treats % specially
    alembic_cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return alembic_cfg


def run_migrations_sync(database_url: str) -> None:
    """Upgrade the database at ``database_url`` to the latest revision."""
    ensure_sqlite_directory(database_url)
    command.upgrade(build_alembic_config(database_url), "head")


async def run_migrations_async(database_url: str) -> None:
    """Run Alembic migrations from async context.

    Uses ThreadPoolExecutor to avoid event loop conflicts with Alembic.
    """
    loop = asyncio.get_running_loop()
    with ThreadPoolExecutor() as pool:
        await loop.run_in_executor(pool, run_migrations_sync, database_url)
