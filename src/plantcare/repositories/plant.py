"""Repository for Plant entity."""

from datetime import datetime
from typing import Any

from sqlmodel import col, select

from src.plantcare.models import Plant, PlantFilter
from src.plantcare.repositories.base import BaseRepository
from src.plantcare.repositories.filters import apply_plant_filter


class PlantRepository(BaseRepository[Plant]):
    """Repository for Plant entity."""

    model = Plant

    async def list_all(
        self,
        plant_filter: PlantFilter = PlantFilter.ALL,
        *,
        now: datetime,
    ) -> list[Plant]:
        """List plants in ``plant_filter``, newest created first.

        Ties on ``created_at`` are broken by descending id.
        """
        query = apply_plant_filter(select(Plant), plant_filter, now)
        query = query.order_by(col(Plant.created_at).desc(), col(Plant.id).desc())
        return await self.fetch_all(query)

    @staticmethod
    def apply_changes(plant: Plant, changes: dict[str, Any]) -> bool:
        """Copy ``changes`` onto ``plant``; return whether anything changed."""
        changed = False
        for field, value in changes.items():
            if getattr(plant, field) != value:
                setattr(plant, field, value)
                changed = True
        return changed
