from src.plantcare.schemas.plant import (
    PlantCreate,
    PlantRead,
    PlantReplace,
    PlantUpdate,
    PlantWatered,
)

__all__ = ["PlantCreate", "PlantRead", "PlantReplace", "PlantUpdate", "PlantWatered"]
