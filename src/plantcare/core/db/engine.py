"""Database engine construction.

The engine is built explicitly by the application factory (or a test) and
passed down; there is no module-level engine singleton.
"""

from datetime import tzinfo
from functools import partial
from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.plantcare.core.config import Settings
from src.plantcare.core.schedule import is_plant_due

PLANT_IS_DUE_SQL_FUNCTION = "plant_is_due"


def _sql_plant_is_due(
    last_watered_at: Any, interval_days: Any, now: Any, *, tz: tzinfo
) -> int:
    """SQLite adapter for the schedule rule (returns 1 for due, 0 for upcoming)."""
    return int(is_plant_due(last_watered_at, interval_days, now, tz))


def register_schedule_functions(dbapi_connection: Any, tz: tzinfo) -> None:
    """Register the watering schedule rule as a SQL function on a connection."""
    dbapi_connection.create_function(
        PLANT_IS_DUE_SQL_FUNCTION,
        3,
        partial(_sql_plant_is_due, tz=tz),
        deterministic=True,
    )


def ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return
    database = url.database
    if not database or database == ":memory:" or database.startswith("file:"):
        return
    Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for ``settings.database_url``.

    Every new DBAPI connection gets the ``plant_is_due`` function so list
    filters can evaluate the schedule rule inside the query.
    """
    ensure_sqlite_directory(settings.database_url)
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )

    tz = settings.tzinfo

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        register_schedule_functions(dbapi_connection, tz)

    return engine


async def dispose_engine(engine: AsyncEngine) -> None:
    """Dispose the database engine. Call during shutdown."""
    await engine.dispose()
