"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.plantcare.api.dependencies.db import DBSession
from src.plantcare.api.dependencies.repositories import PlantRepo
from src.plantcare.services.plant_service import PlantService


def get_plant_service(plant_repo: PlantRepo, session: DBSession) -> PlantService:
    """Get plant service."""
    return PlantService(plant_repo, session)


PlantServiceDep = Annotated[PlantService, Depends(get_plant_service)]
