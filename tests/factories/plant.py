"""Plant factory for test data generation."""

import random
from datetime import datetime, timedelta

from polyfactory import Use

from src.plantcare.models import Plant
from src.plantcare.models.base import to_naive_utc
from tests.factories.base import BaseFactory, utc_now

SPECIES = [
    "Monstera deliciosa",
    "Sansevieria trifasciata",
    "Ficus lyrata",
    "Epipremnum aureum",
    "Calathea orbifolia",
]


class PlantFactory(BaseFactory):
    """Factory for generating Plant test data."""

    __model__ = Plant

    id = None  # Assigned by the database
    name = Use(lambda: f"Plant {random.randint(1000, 9999)}")
    species = Use(random.choice, SPECIES)
    watering_interval_days = Use(random.randint, 1, 365)
    last_watered_at = None
    notes = ""
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def never_watered(cls, **kwargs):
        """Create a plant that has never been watered."""
        return cls.build(last_watered_at=None, **kwargs)

    @classmethod
    def watered(cls, at: datetime, interval_days: int, **kwargs):
        """Create a plant last watered at ``at`` with the given interval."""
        return cls.build(
            last_watered_at=to_naive_utc(at),
            watering_interval_days=interval_days,
            **kwargs,
        )

    @classmethod
    def due_in(cls, now: datetime, delta: timedelta, interval_days: int = 7, **kwargs):
        """Create a plant whose next watering is ``delta`` after ``now``.

        Negative deltas give overdue plants.
        """
        last = now + delta - timedelta(days=interval_days)
        return cls.watered(last, interval_days, **kwargs)
