from fastapi import APIRouter

from src.plantcare.api.v1 import plants

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(plants.router)
