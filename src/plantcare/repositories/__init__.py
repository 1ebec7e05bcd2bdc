"""Repository layer - data access abstraction."""

from src.plantcare.repositories.base import BaseRepository
from src.plantcare.repositories.plant import PlantRepository

__all__ = [
    "BaseRepository",
    "PlantRepository",
]
