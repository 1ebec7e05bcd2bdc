"""Alembic environment for the plant database.

The URL comes from the programmatic config built by
``src.plantcare.core.db.migrations`` and falls back to the application
settings when Alembic is driven from the command line.
"""

from sqlalchemy import create_engine, pool
from sqlalchemy.engine import URL, make_url
from sqlmodel import SQLModel

from alembic import context
from src.plantcare.core.config import get_settings

# Register every table on SQLModel.metadata
from src.plantcare.models import Plant  # noqa: F401

config = context.config
target_metadata = SQLModel.metadata


def get_url() -> URL:
    """Migration URL with the async driver swapped for the sync one."""
    raw = config.get_main_option("sqlalchemy.url") or get_settings().database_url
    url = make_url(raw)
    if url.drivername == "sqlite+aiosqlite":
        url = url.set(drivername="sqlite")
    return url


def configure(**kwargs) -> None:
    # SQLite cannot ALTER most constraints in place
    context.configure(target_metadata=target_metadata, render_as_batch=True, **kwargs)


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of touching a database."""
    configure(
        url=get_url().render_as_string(hide_password=False),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a short-lived sync connection."""
    connectable = create_engine(get_url(), poolclass=pool.NullPool)
    try:
        with connectable.connect() as connection:
            configure(connection=connection, compare_type=True)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
