"""Plant care service - business logic for the plant list."""

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from src.plantcare.core.logging import bind_plant_context, get_logger
from src.plantcare.models import Plant, PlantFilter
from src.plantcare.models.base import to_naive_utc, utc_now
from src.plantcare.repositories import PlantRepository
from src.plantcare.schemas.plant import PlantCreate, PlantReplace, PlantUpdate

logger = get_logger(__name__)


class PlantService:
    """Create, list, update and delete plants.

    Lookups that find nothing return None (or False for deletes); the API
    layer turns that into a 404.
    """

    def __init__(self, plant_repo: PlantRepository, session: AsyncSession):
        self.plant_repo = plant_repo
        self.session = session

    async def list_plants(self, plant_filter: PlantFilter, now: datetime) -> list[Plant]:
        """List plants in the given view at ``now``, newest first."""
        plants = await self.plant_repo.list_all(plant_filter, now=now)
        logger.debug("Listed plants", filter=plant_filter.value, count=len(plants))
        return plants

    async def get_plant(self, plant_id: int) -> Plant | None:
        """Get a plant by ID."""
        return await self.plant_repo.get_by_id(plant_id)

    async def create_plant(self, data: PlantCreate) -> Plant:
        """Create a plant from validated input."""
        plant = Plant(
            name=data.name,
            species=data.species,
            watering_interval_days=data.watering_interval_days,
            last_watered_at=data.last_watered_at,
            notes=data.notes,
        )
        self.plant_repo.add(plant)
        await self._commit(plant)
        logger.info("Plant created", plant_id=plant.id, species=plant.species)
        return plant

    async def replace_plant(self, plant_id: int, data: PlantReplace) -> Plant | None:
        """Overwrite every mutable field of a plant."""
        return await self._apply(plant_id, data.model_dump())

    async def update_plant(self, plant_id: int, data: PlantUpdate) -> Plant | None:
        """Apply the fields present in a partial update."""
        return await self._apply(plant_id, data.changes())

    async def mark_watered(self, plant_id: int, watered_at: datetime | None = None) -> Plant | None:
        """Record a watering, at ``watered_at`` or now."""
        when = utc_now() if watered_at is None else to_naive_utc(watered_at)
        return await self._apply(plant_id, {"last_watered_at": when})

    async def delete_plant(self, plant_id: int) -> bool:
        """Delete a plant. Returns False if it did not exist."""
        bind_plant_context(plant_id)
        plant = await self.plant_repo.get_by_id(plant_id)
        if plant is None:
            return False

        await self.plant_repo.delete(plant)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Plant deleted", plant_id=plant_id)
        return True

    async def _apply(self, plant_id: int, changes: dict) -> Plant | None:
        bind_plant_context(plant_id)
        plant = await self.plant_repo.get_by_id(plant_id)
        if plant is None:
            return None

        if not self.plant_repo.apply_changes(plant, changes):
            return plant

        # SQLModel has no onupdate hook, so stamp updated_at explicitly
        plant.updated_at = utc_now()
        await self._commit(plant)
        logger.info("Plant updated", plant_id=plant_id, fields=sorted(changes))
        return plant

    async def _commit(self, plant: Plant) -> None:
        try:
            await self.session.commit()
            await self.session.refresh(plant)
        except Exception:
            await self.session.rollback()
            raise
