"""Watering schedule rules.

Every place that needs to know when a plant is next due (the SQL list
filter, API responses, the client badges) goes through these functions.

Timestamps may arrive as ``datetime`` objects or ISO-8601 strings. Naive
values are treated as UTC. Anything that cannot be parsed is treated as
"absent", which always classifies a plant as due.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo
from enum import Enum
from typing import Any

ONE_DAY = timedelta(days=1)
SOON_THRESHOLD_DAYS = 2


class UrgencyTone(str, Enum):
    """How urgently a plant needs water."""

    DUE = "due"
    SOON = "soon"
    OK = "ok"


@dataclass(frozen=True)
class Urgency:
    """Urgency tier plus whole-day offset to the next watering.

    ``day_offset`` is None when the plant has no usable due date.
    """

    tone: UrgencyTone
    day_offset: int | None


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a timestamp into an aware UTC datetime.

    Returns None for None, empty strings, unsupported types, strings that
    are not valid ISO-8601 and values whose UTC equivalent is out of range.
    Never raises.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError:
        # An offset pushed it past datetime.min or datetime.max
        return None


def compute_next_due_at(
    last_watered_at: Any,
    interval_days: int,
    tz: tzinfo = UTC,
) -> datetime | None:
    """Return when a plant is next due for water.

    The interval is added as calendar days on the wall clock of ``tz``, so a
    plant watered at 09:00 local time is due at 09:00 local time even when a
    DST change falls inside the interval.

    Args:
        last_watered_at: Last watering time (datetime or ISO string), or None.
        interval_days: Watering interval in days (1-365).
        tz: Time zone in which calendar days are counted.

    Returns:
        Aware UTC datetime, or None if ``last_watered_at`` is absent or invalid
        or the due date falls outside the representable range.
    """
    last = parse_timestamp(last_watered_at)
    if last is None:
        return None

    try:
        due_local = last.astimezone(tz) + timedelta(days=int(interval_days))
        return due_local.astimezone(UTC)
    except OverflowError:
        return None


def is_due_now(last_watered_at: Any, next_due_at: Any, now: Any = None) -> bool:
    """Whether a plant needs water at ``now``.

    Missing or unparseable data always counts as due. The boundary is
    inclusive: a plant whose due time equals ``now`` is due.
    """
    if parse_timestamp(last_watered_at) is None:
        return True

    next_due = parse_timestamp(next_due_at)
    if next_due is None:
        return True

    return next_due <= _resolve_now(now)


def is_plant_due(
    last_watered_at: Any,
    interval_days: int,
    now: Any = None,
    tz: tzinfo = UTC,
) -> bool:
    """Whether a stored plant record is due, computed from its raw fields."""
    next_due = compute_next_due_at(last_watered_at, interval_days, tz)
    return is_due_now(last_watered_at, next_due, now)


def classify_urgency(next_due_at: Any, now: Any = None) -> Urgency:
    """Classify how soon a plant is due.

    ``day_offset`` is the number of days until the due time, rounded up: a
    plant due in 5 hours has an offset of 1, one that became due 5 hours ago
    has an offset of 0 and one overdue by 30 hours has an offset of -1.
    """
    next_due = parse_timestamp(next_due_at)
    if next_due is None:
        return Urgency(tone=UrgencyTone.DUE, day_offset=None)

    # ceil((next_due - now) / 1 day) with integer arithmetic
    day_offset = -((_resolve_now(now) - next_due) // ONE_DAY)

    if day_offset <= 0:
        tone = UrgencyTone.DUE
    elif day_offset <= SOON_THRESHOLD_DAYS:
        tone = UrgencyTone.SOON
    else:
        tone = UrgencyTone.OK
    return Urgency(tone=tone, day_offset=day_offset)


def _resolve_now(now: Any) -> datetime:
    if now is None:
        return utc_now()
    resolved = parse_timestamp(now)
    if resolved is None:
        raise ValueError(f"Invalid reference time: {now!r}")
    return resolved
