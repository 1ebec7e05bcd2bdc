from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from src.plantcare.api.middlewares import setup_middlewares
from src.plantcare.api.v1.router import api_router
from src.plantcare.core.config import Settings, get_settings
from src.plantcare.core.db import create_engine, dispose_engine, run_migrations_async
from src.plantcare.core.exceptions import setup_exception_handlers
from src.plantcare.core.health import setup_health_endpoint, setup_metrics
from src.plantcare.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

OPENAPI_TAGS = [
    {"name": "plants", "description": "Plants, watering intervals and due/upcoming views"},
    {"name": "health", "description": "Liveness and metrics"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings.debug, sql_echo=settings.database_echo)
    logger.info(f"Starting {settings.app_name}", care_timezone=settings.care_timezone)

    if settings.run_migrations_on_startup:
        await run_migrations_async(settings.database_url)
        logger.info("Database migrations applied")

    yield

    logger.info("Closing connections...")
    await dispose_engine(app.state.engine)
    logger.info("Shutdown complete")


def create_app(settings: Settings | None = None, engine: AsyncEngine | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to use; defaults to ``get_settings()``.
        engine: Storage handle to use; built from ``settings`` when omitted.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Track plants, watering intervals and what needs water next",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )
    app.state.settings = settings
    app.state.engine = engine or create_engine(settings)

    setup_exception_handlers(app)
    setup_middlewares(app, settings)
    app.include_router(api_router)
    setup_health_endpoint(app)
    setup_metrics(app)

    return app
