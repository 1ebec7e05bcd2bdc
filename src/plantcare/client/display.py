"""Presentation of fetched plants: urgency badges, summaries, counts.

Everything here works from a plant as returned by the API. The due date is
read from ``nextWateringDueAt`` and never recomputed from the raw fields;
only its distance from the viewer's clock is derived here. A badge may
therefore briefly disagree with the server's due/upcoming lists if the
clocks differ or time passed since the fetch.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from src.plantcare.core.schedule import (
    UrgencyTone,
    classify_urgency,
    is_due_now as rule_is_due_now,
    parse_timestamp,
    utc_now,
)

NEEDS_WATER = "Needs water"


@dataclass(frozen=True)
class DueBadge:
    """Badge text and tone shown next to a plant."""

    text: str
    tone: UrgencyTone


@dataclass(frozen=True)
class PlantSummary:
    """Counts shown above the plant list."""

    total: int
    due: int
    upcoming: int


def _field(plant: Mapping[str, Any], camel: str, snake: str) -> Any:
    if camel in plant:
        return plant[camel]
    return plant.get(snake)


def _last_watered(plant: Mapping[str, Any]) -> Any:
    return _field(plant, "lastWateredAt", "last_watered_at")


def _next_due(plant: Mapping[str, Any]) -> Any:
    return _field(plant, "nextWateringDueAt", "next_watering_due_at")


def is_due_now(plant: Mapping[str, Any], now: datetime | None = None) -> bool:
    """Whether the viewer should see this plant as needing water."""
    return rule_is_due_now(_last_watered(plant), _next_due(plant), now)


def due_badge(plant: Mapping[str, Any], now: datetime | None = None) -> DueBadge:
    """Badge for a plant, e.g. "Overdue 2d", "Due today", "Due in 3d"."""
    if parse_timestamp(_last_watered(plant)) is None:
        return DueBadge(NEEDS_WATER, UrgencyTone.DUE)

    urgency = classify_urgency(_next_due(plant), now)
    offset = urgency.day_offset
    if offset is None:
        return DueBadge(NEEDS_WATER, UrgencyTone.DUE)
    if offset < 0:
        return DueBadge(f"Overdue {abs(offset)}d", urgency.tone)
    if offset == 0:
        return DueBadge("Due today", urgency.tone)
    return DueBadge(f"Due in {offset}d", urgency.tone)


def format_date(value: Any) -> str:
    """Format a timestamp as "Oct 19, 2026"; unparseable values are returned as-is."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value)
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def last_watered_summary(plant: Mapping[str, Any]) -> str:
    last = _last_watered(plant)
    if not last:
        return "Last watered: Never"
    return f"Last watered: {format_date(last)}"


def interval_summary(plant: Mapping[str, Any]) -> str:
    days = _field(plant, "wateringIntervalDays", "watering_interval_days")
    return f"Every {days} day(s)"


def summarize(plants: Iterable[Mapping[str, Any]], now: datetime | None = None) -> PlantSummary:
    """Count total, due and upcoming plants as the viewer sees them."""
    plants = list(plants)
    now = now or utc_now()
    due = sum(1 for plant in plants if is_due_now(plant, now))
    return PlantSummary(total=len(plants), due=due, upcoming=len(plants) - due)
