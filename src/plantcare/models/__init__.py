"""Model exports."""

from src.plantcare.models.enums import PlantFilter
from src.plantcare.models.plant import MAX_INTERVAL_DAYS, MIN_INTERVAL_DAYS, Plant

__all__ = [
    "MAX_INTERVAL_DAYS",
    "MIN_INTERVAL_DAYS",
    "Plant",
    "PlantFilter",
]
