from src.plantcare.services.plant_service import PlantService

__all__ = ["PlantService"]
