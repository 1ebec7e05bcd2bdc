"""Database utilities - engine, session, migrations."""

from src.plantcare.core.db.engine import (
    create_engine,
    dispose_engine,
    register_schedule_functions,
)
from src.plantcare.core.db.migrations import run_migrations_async, run_migrations_sync
from src.plantcare.core.db.session import get_session

__all__ = [
    # Engine
    "create_engine",
    "dispose_engine",
    "register_schedule_functions",
    # Session
    "get_session",
    # Migrations
    "run_migrations_async",
    "run_migrations_sync",
]
