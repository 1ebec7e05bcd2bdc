"""Shared enums for models."""

from enum import Enum


class PlantFilter(str, Enum):
    """Named views over the plant list."""

    ALL = "all"
    DUE = "due"
    UPCOMING = "upcoming"

    @classmethod
    def parse(cls, raw: str | None) -> "PlantFilter":
        """Parse a filter name case-insensitively; unknown names mean ``all``."""
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.ALL
