"""Health check and metrics endpoints."""

import time
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text

from src.plantcare.core.db import get_session
from src.plantcare.core.logging import get_logger

logger = get_logger(__name__)


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the health check endpoint."""

    @app.get("/health", tags=["health"])
    async def health(request: Request) -> JSONResponse:
        """Health check with database validation."""
        health_status: dict[str, Any] = {
            "status": "healthy",
            "database": "unknown",
            "timestamp": time.time(),
        }

        try:
            async with get_session(request.app.state.engine) as session:
                await session.execute(text("SELECT 1"))
            health_status["database"] = "healthy"
        except Exception as e:
            logger.warning("Database health check failed", error=str(e))
            health_status["database"] = f"unhealthy: {e!s}"
            health_status["status"] = "unhealthy"

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)


def setup_metrics(app: FastAPI) -> None:
    """Expose Prometheus metrics on /metrics."""
    Instrumentator().instrument(app).expose(app, endpoint="/metrics", tags=["health"])
