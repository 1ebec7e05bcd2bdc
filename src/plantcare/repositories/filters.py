"""List filters for plants, evaluated inside the database query.

``due`` and ``upcoming`` are built from the same SQL function,
``plant_is_due``, which the engine registers on every connection and which
delegates to :func:`src.plantcare.core.schedule.is_plant_due`. Because both
predicates call one function (and ``upcoming`` is its exact negation for
watered plants), every plant lands in exactly one of the two views.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, and_, bindparam, func, or_
from sqlalchemy.sql.elements import ColumnElement

from src.plantcare.core.db.engine import PLANT_IS_DUE_SQL_FUNCTION
from src.plantcare.models.base import to_naive_utc
from src.plantcare.models.enums import PlantFilter
from src.plantcare.models.plant import Plant

__all__ = [
    "PlantFilter",
    "apply_plant_filter",
    "due_predicate",
    "plant_is_due",
    "upcoming_predicate",
]


def plant_is_due(now: datetime) -> ColumnElement[Any]:
    """SQL expression evaluating the schedule rule for each row at ``now``."""
    return getattr(func, PLANT_IS_DUE_SQL_FUNCTION)(
        Plant.last_watered_at,
        Plant.watering_interval_days,
        bindparam("due_reference_time", to_naive_utc(now), type_=DateTime(), unique=True),
    )


def due_predicate(now: datetime) -> ColumnElement[bool]:
    """Plants never watered, or whose next watering time is at or before ``now``."""
    return or_(
        Plant.last_watered_at.is_(None),  # type: ignore[union-attr]
        plant_is_due(now) == 1,
    )


def upcoming_predicate(now: datetime) -> ColumnElement[bool]:
    """Watered plants whose next watering time is after ``now``."""
    return and_(
        Plant.last_watered_at.is_not(None),  # type: ignore[union-attr]
        plant_is_due(now) == 0,
    )


def apply_plant_filter(query: Any, plant_filter: PlantFilter, now: datetime) -> Any:
    """Restrict ``query`` to the plants in ``plant_filter`` at ``now``."""
    if plant_filter is PlantFilter.DUE:
        return query.where(due_predicate(now))
    if plant_filter is PlantFilter.UPCOMING:
        return query.where(upcoming_predicate(now))
    return query
