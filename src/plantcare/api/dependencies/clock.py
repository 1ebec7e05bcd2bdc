"""Clock and scheduling dependencies."""

from datetime import datetime, tzinfo
from typing import Annotated

from fastapi import Depends, Request

from src.plantcare.core.schedule import utc_now


def get_now() -> datetime:
    """Reference time for due/upcoming filtering (host clock, UTC).

    Resolved once per request so a single request never mixes two clocks.
    """
    return utc_now()


def get_care_timezone(request: Request) -> tzinfo:
    """Time zone in which watering intervals are counted."""
    return request.app.state.settings.tzinfo


Now = Annotated[datetime, Depends(get_now)]
CareTimezone = Annotated[tzinfo, Depends(get_care_timezone)]
