"""Client side: API access, display classification and form handling."""

from src.plantcare.client.api import ApiError, PlantApiClient
from src.plantcare.client.display import DueBadge, PlantSummary, due_badge, is_due_now, summarize
from src.plantcare.client.forms import DraftError, PlantDraft, validate_draft

__all__ = [
    "ApiError",
    "DraftError",
    "DueBadge",
    "PlantApiClient",
    "PlantDraft",
    "PlantSummary",
    "due_badge",
    "is_due_now",
    "summarize",
    "validate_draft",
]
