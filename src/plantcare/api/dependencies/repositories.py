"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.plantcare.api.dependencies.db import DBSession
from src.plantcare.repositories import PlantRepository


def get_plant_repository(session: DBSession) -> PlantRepository:
    """Get plant repository bound to the request session."""
    return PlantRepository(session)


PlantRepo = Annotated[PlantRepository, Depends(get_plant_repository)]
