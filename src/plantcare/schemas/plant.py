"""Plant schemas for API request/response.

Field names are camelCase on the wire (``wateringIntervalDays``); the
snake_case attribute names are accepted on input as well.
"""

from datetime import UTC, datetime, tzinfo
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.plantcare.core.schedule import compute_next_due_at
from src.plantcare.models.base import to_naive_utc
from src.plantcare.models.plant import (
    MAX_INTERVAL_DAYS,
    MAX_TIMESTAMP_YEAR,
    MIN_INTERVAL_DAYS,
    MIN_TIMESTAMP_YEAR,
    Plant,
)

WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _required_text(v: str, field: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(f"{field} cannot be empty or whitespace only")
    return v


def _normalize_timestamp(v: Any) -> Any:
    """Treat empty strings as "never watered"."""
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _storage_timestamp(v: datetime | None) -> datetime | None:
    if v is None:
        return None
    # Checked on the given wall time, before any offset is applied
    if not MIN_TIMESTAMP_YEAR <= v.year <= MAX_TIMESTAMP_YEAR:
        raise ValueError(
            f"Timestamp must be between the years {MIN_TIMESTAMP_YEAR} and {MAX_TIMESTAMP_YEAR}"
        )
    return to_naive_utc(v)


def _notes(v: str | None) -> str:
    return "" if v is None else v.strip()


class PlantCreate(BaseModel):
    """Schema for creating a plant."""

    model_config = WIRE_CONFIG

    name: str = Field(min_length=1, max_length=200)
    species: str = Field(min_length=1, max_length=200)
    watering_interval_days: int = Field(ge=MIN_INTERVAL_DAYS, le=MAX_INTERVAL_DAYS)
    last_watered_at: datetime | None = None
    notes: str = Field(default="", max_length=2000)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _required_text(v, "Name")

    @field_validator("species")
    @classmethod
    def validate_species(cls, v: str) -> str:
        return _required_text(v, "Species")

    @field_validator("last_watered_at", mode="before")
    @classmethod
    def blank_timestamp_is_none(cls, v: Any) -> Any:
        return _normalize_timestamp(v)

    @field_validator("last_watered_at")
    @classmethod
    def validate_last_watered_at(cls, v: datetime | None) -> datetime | None:
        return _storage_timestamp(v)

    @field_validator("notes", mode="before")
    @classmethod
    def validate_notes(cls, v: str | None) -> str:
        return _notes(v)


class PlantReplace(PlantCreate):
    """Schema for replacing all mutable fields of a plant (PUT)."""


class PlantUpdate(BaseModel):
    """Schema for partially updating a plant (PATCH).

    Only fields present in the request are applied. ``lastWateredAt: null``
    clears the last watering date.
    """

    model_config = WIRE_CONFIG

    name: str | None = Field(default=None, min_length=1, max_length=200)
    species: str | None = Field(default=None, min_length=1, max_length=200)
    watering_interval_days: int | None = Field(
        default=None, ge=MIN_INTERVAL_DAYS, le=MAX_INTERVAL_DAYS
    )
    last_watered_at: datetime | None = None
    notes: str | None = Field(default=None, max_length=2000)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is None:
            raise ValueError("Name cannot be null")
        return _required_text(v, "Name")

    @field_validator("species")
    @classmethod
    def validate_species(cls, v: str | None) -> str | None:
        if v is None:
            raise ValueError("Species cannot be null")
        return _required_text(v, "Species")

    @field_validator("watering_interval_days")
    @classmethod
    def validate_interval(cls, v: int | None) -> int | None:
        if v is None:
            raise ValueError("wateringIntervalDays cannot be null")
        return v

    @field_validator("last_watered_at", mode="before")
    @classmethod
    def blank_timestamp_is_none(cls, v: Any) -> Any:
        return _normalize_timestamp(v)

    @field_validator("last_watered_at")
    @classmethod
    def validate_last_watered_at(cls, v: datetime | None) -> datetime | None:
        return _storage_timestamp(v)

    @field_validator("notes", mode="before")
    @classmethod
    def validate_notes(cls, v: str | None) -> str:
        return _notes(v)

    def changes(self) -> dict[str, Any]:
        """Fields explicitly sent by the client, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class PlantWatered(BaseModel):
    """Optional body for marking a plant as watered."""

    model_config = WIRE_CONFIG

    watered_at: datetime | None = None

    @field_validator("watered_at", mode="before")
    @classmethod
    def blank_timestamp_is_none(cls, v: Any) -> Any:
        return _normalize_timestamp(v)

    @field_validator("watered_at")
    @classmethod
    def validate_watered_at(cls, v: datetime | None) -> datetime | None:
        return _storage_timestamp(v)


class PlantRead(BaseModel):
    """Schema for reading a plant.

    Timestamps are emitted as UTC. ``next_watering_due_at`` is derived at
    read time and never stored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    name: str
    species: str
    watering_interval_days: int
    last_watered_at: datetime | None
    notes: str
    created_at: datetime
    updated_at: datetime
    next_watering_due_at: datetime | None = None

    @field_validator("last_watered_at", "created_at", "updated_at", "next_watering_due_at")
    @classmethod
    def as_utc(cls, v: datetime | None) -> datetime | None:
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)

    @classmethod
    def from_plant(cls, plant: Plant, tz: tzinfo = UTC) -> "PlantRead":
        """Build the response for ``plant`` with its next due date computed in ``tz``."""
        read = cls.model_validate(plant)
        read.next_watering_due_at = compute_next_due_at(
            read.last_watered_at, read.watering_interval_days, tz
        )
        return read
