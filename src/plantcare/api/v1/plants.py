"""Plant endpoints - CRUD plus due/upcoming views."""

from typing import Annotated

from fastapi import APIRouter, Body, HTTPException, Path, Query, status

from src.plantcare.api.dependencies import CareTimezone, Now, PlantServiceDep
from src.plantcare.models import PlantFilter
from src.plantcare.schemas.plant import (
    PlantCreate,
    PlantRead,
    PlantReplace,
    PlantUpdate,
    PlantWatered,
)

router = APIRouter(prefix="/plants", tags=["plants"])

PlantId = Annotated[int, Path(gt=0, description="Plant ID")]


def _not_found(plant_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Plant {plant_id} not found",
    )


@router.get(
    "",
    response_model=list[PlantRead],
    summary="List plants",
    description=(
        "List plants newest first. `filter=due` returns plants never watered or whose "
        "next watering time has passed; `filter=upcoming` returns the rest. Unknown "
        "filters behave like `all`."
    ),
    responses={
        200: {"description": "List of plants"},
    },
)
async def list_plants(
    service: PlantServiceDep,
    now: Now,
    tz: CareTimezone,
    plant_filter: Annotated[
        str | None,
        Query(alias="filter", description="One of all, due, upcoming"),
    ] = None,
) -> list[PlantRead]:
    """List plants in the requested view."""
    plants = await service.list_plants(PlantFilter.parse(plant_filter), now)
    return [PlantRead.from_plant(p, tz) for p in plants]


@router.get(
    "/{plant_id}",
    response_model=PlantRead,
    summary="Get plant",
    responses={
        200: {"description": "Plant details"},
        404: {"description": "Plant not found"},
    },
)
async def get_plant(plant_id: PlantId, service: PlantServiceDep, tz: CareTimezone) -> PlantRead:
    """Get a plant by ID."""
    plant = await service.get_plant(plant_id)
    if plant is None:
        raise _not_found(plant_id)
    return PlantRead.from_plant(plant, tz)


@router.post(
    "",
    response_model=PlantRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create plant",
    responses={
        201: {"description": "Plant created"},
        400: {"description": "Invalid plant data"},
    },
)
async def create_plant(
    request: PlantCreate,
    service: PlantServiceDep,
    tz: CareTimezone,
) -> PlantRead:
    """Create a new plant."""
    plant = await service.create_plant(request)
    return PlantRead.from_plant(plant, tz)


@router.put(
    "/{plant_id}",
    response_model=PlantRead,
    summary="Replace plant",
    description="Replace every editable field. Omitted lastWateredAt and notes are cleared.",
    responses={
        200: {"description": "Plant replaced"},
        404: {"description": "Plant not found"},
    },
)
async def replace_plant(
    plant_id: PlantId,
    request: PlantReplace,
    service: PlantServiceDep,
    tz: CareTimezone,
) -> PlantRead:
    """Replace a plant's editable fields."""
    plant = await service.replace_plant(plant_id, request)
    if plant is None:
        raise _not_found(plant_id)
    return PlantRead.from_plant(plant, tz)


@router.patch(
    "/{plant_id}",
    response_model=PlantRead,
    summary="Update plant",
    description="Update only the provided fields. Send lastWateredAt: null to clear it.",
    responses={
        200: {"description": "Plant updated"},
        400: {"description": "Nothing to update or invalid data"},
        404: {"description": "Plant not found"},
    },
)
async def update_plant(
    plant_id: PlantId,
    request: PlantUpdate,
    service: PlantServiceDep,
    tz: CareTimezone,
) -> PlantRead:
    """Partially update a plant."""
    if not request.changes():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Nothing to update",
        )

    plant = await service.update_plant(plant_id, request)
    if plant is None:
        raise _not_found(plant_id)
    return PlantRead.from_plant(plant, tz)


@router.post(
    "/{plant_id}/watered",
    response_model=PlantRead,
    summary="Mark plant watered",
    description="Set lastWateredAt to now, or to wateredAt when given.",
    responses={
        200: {"description": "Watering recorded"},
        404: {"description": "Plant not found"},
    },
)
async def mark_watered(
    plant_id: PlantId,
    service: PlantServiceDep,
    now: Now,
    tz: CareTimezone,
    request: Annotated[PlantWatered | None, Body()] = None,
) -> PlantRead:
    """Record that a plant was watered."""
    watered_at = request.watered_at if request and request.watered_at else now
    plant = await service.mark_watered(plant_id, watered_at)
    if plant is None:
        raise _not_found(plant_id)
    return PlantRead.from_plant(plant, tz)


@router.delete(
    "/{plant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete plant",
    responses={
        204: {"description": "Plant deleted"},
        404: {"description": "Plant not found"},
    },
)
async def delete_plant(plant_id: PlantId, service: PlantServiceDep) -> None:
    """Delete a plant."""
    if not await service.delete_plant(plant_id):
        raise _not_found(plant_id)
