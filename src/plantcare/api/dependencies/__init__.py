"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Clock
from src.plantcare.api.dependencies.clock import (
    CareTimezone,
    Now,
    get_care_timezone,
    get_now,
)

# Database
from src.plantcare.api.dependencies.db import DBSession, get_db_session, get_engine

# Repositories
from src.plantcare.api.dependencies.repositories import PlantRepo, get_plant_repository

# Services
from src.plantcare.api.dependencies.services import PlantServiceDep, get_plant_service

__all__ = [
    # Clock
    "CareTimezone",
    "Now",
    "get_care_timezone",
    "get_now",
    # Database
    "DBSession",
    "get_db_session",
    "get_engine",
    # Repositories
    "PlantRepo",
    "get_plant_repository",
    # Services
    "PlantServiceDep",
    "get_plant_service",
]
