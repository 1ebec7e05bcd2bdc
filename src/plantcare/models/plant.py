"""Plant model."""

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, Text
from sqlmodel import Field, SQLModel

from src.plantcare.models.base import utc_now

MIN_INTERVAL_DAYS = 1
MAX_INTERVAL_DAYS = 365
# Accepted calendar years for watering timestamps
MIN_TIMESTAMP_YEAR = 1900
MAX_TIMESTAMP_YEAR = 2999


class Plant(SQLModel, table=True):
    """A tracked plant and its watering cadence.

    ``last_watered_at`` is None until the plant is first watered. The next
    due date is never stored; see ``src.plantcare.core.schedule``.
    """

    __tablename__ = "plants"
    __table_args__ = (
        CheckConstraint(
            f"watering_interval_days BETWEEN {MIN_INTERVAL_DAYS} AND {MAX_INTERVAL_DAYS}",
            name="ck_plants_watering_interval_days",
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=200)
    species: str = Field(max_length=200)
    watering_interval_days: int
    # Timestamps are stored as naive UTC
    last_watered_at: datetime | None = Field(
        default=None, sa_column=Column(DateTime(timezone=False), nullable=True)
    )
    notes: str = Field(default="", sa_column=Column(Text, nullable=False, server_default=""))
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=False), nullable=False, index=True),
    )
    updated_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=False), nullable=False)
    )
