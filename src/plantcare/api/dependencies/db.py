"""Database session dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.plantcare.core.db import get_session


def get_engine(request: Request) -> AsyncEngine:
    """Return the engine the application was constructed with."""
    return request.app.state.engine


async def get_db_session(
    engine: Annotated[AsyncEngine, Depends(get_engine)],
) -> AsyncGenerator[AsyncSession]:
    """Get a database session for the current request."""
    async with get_session(engine) as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
