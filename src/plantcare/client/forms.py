"""Form drafts for adding and editing plants.

A draft holds the raw strings a user typed. ``validate_draft`` turns it
into an API payload or raises :class:`DraftError` with a message suitable
for showing next to the form.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, tzinfo
from typing import Any

from src.plantcare.core.schedule import parse_timestamp
from src.plantcare.models.plant import MAX_INTERVAL_DAYS, MIN_INTERVAL_DAYS

DEFAULT_INTERVAL_DAYS = "7"
# Date-only input is pinned to midday so zone offsets never move it to another day
DATE_INPUT_TIME = time(12, 0)


class DraftError(ValueError):
    """A form draft failed validation."""


@dataclass
class PlantDraft:
    name: str = ""
    species: str = ""
    watering_interval_days: str = DEFAULT_INTERVAL_DAYS
    last_watered_at: str = ""
    notes: str = ""


def from_date_input(value: str, tz: tzinfo = UTC) -> str | None:
    """Convert a date (``YYYY-MM-DD``) or timestamp input into an ISO UTC string.

    Date-only values mean midday in ``tz``. Blank or invalid input is None.
    """
    value = value.strip()
    if not value:
        return None

    try:
        day = date.fromisoformat(value)
    except ValueError:
        parsed = parse_timestamp(value)
    else:
        parsed = datetime.combine(day, DATE_INPUT_TIME, tzinfo=tz).astimezone(UTC)

    if parsed is None:
        return None
    return parsed.isoformat().replace("+00:00", "Z")


def to_date_input(value: Any) -> str:
    """Render a stored timestamp as ``YYYY-MM-DD`` (UTC date) for editing."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return ""
    return parsed.date().isoformat()


def validate_draft(draft: PlantDraft, tz: tzinfo = UTC) -> dict[str, Any]:
    """Validate a draft and build the create/update payload."""
    name = draft.name.strip()
    if not name:
        raise DraftError("Plant name is required")

    species = draft.species.strip()
    if not species:
        raise DraftError("Species is required")

    try:
        interval = int(draft.watering_interval_days.strip())
    except ValueError:
        interval = 0
    if not MIN_INTERVAL_DAYS <= interval <= MAX_INTERVAL_DAYS:
        raise DraftError(
            f"Watering interval must be between {MIN_INTERVAL_DAYS} and {MAX_INTERVAL_DAYS} days"
        )

    return {
        "name": name,
        "species": species,
        "wateringIntervalDays": interval,
        "lastWateredAt": from_date_input(draft.last_watered_at, tz),
        "notes": draft.notes.strip(),
    }


def draft_from_plant(plant: Mapping[str, Any]) -> PlantDraft:
    """Pre-fill an edit form from a fetched plant."""
    return PlantDraft(
        name=plant.get("name", ""),
        species=plant.get("species", ""),
        watering_interval_days=str(plant.get("wateringIntervalDays", DEFAULT_INTERVAL_DAYS)),
        last_watered_at=to_date_input(plant.get("lastWateredAt")),
        notes=plant.get("notes", ""),
    )
