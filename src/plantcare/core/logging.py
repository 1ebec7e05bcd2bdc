"""Logging configuration using structlog.

structlog loggers and plain stdlib loggers (uvicorn, SQLAlchemy, Alembic)
share one processor chain and one handler, so every line comes out in the
same format with the same request context.
"""

import logging
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

NOISY_LOGGERS = ("aiosqlite", "alembic", "httpx", "httpcore")


def _shared_processors() -> list[structlog.typing.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(debug: bool = False, sql_echo: bool = False) -> None:
    """Configure structlog and route stdlib logging through it.

    Args:
        debug: Colored console output at DEBUG level. Otherwise JSON lines at INFO.
        sql_echo: Keep SQL statement logging (``DATABASE_ECHO``) at INFO.
    """
    shared = _shared_processors()

    if debug:
        render: list[structlog.typing.Processor] = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        render = [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *render],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if sql_echo else logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional logger name.

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None) -> None:
    """Bind the correlation ID of the current request to subsequent log calls."""
    if request_id:
        bind_contextvars(request_id=request_id)


def bind_plant_context(plant_id: int) -> None:
    """Bind the plant being operated on to subsequent log calls."""
    bind_contextvars(plant_id=plant_id)


def clear_request_context() -> None:
    """Clear all request-scoped context."""
    clear_contextvars()
