"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import PlantFactory
"""

from tests.factories.base import BaseFactory, utc_now
from tests.factories.plant import PlantFactory

__all__ = [
    "BaseFactory",
    "PlantFactory",
    "utc_now",
]
