"""Test helpers shared by unit and integration tests."""

from datetime import UTC, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from src.plantcare.models import Plant

# Fixed reference time for anything that depends on "now"
NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


def iso(value: datetime) -> str:
    """Format an aware datetime the way the API does ("...Z")."""
    return value.astimezone(UTC).isoformat().replace("+00:00", "Z")


async def seed_plants(session: AsyncSession, plants: list[Plant]) -> list[Plant]:
    """Persist plants and return them with their ids assigned.

    Args:
        session: Database session
        plants: Unsaved plants, typically from PlantFactory.build()

    Returns:
        The same plants after commit
    """
    session.add_all(plants)
    await session.commit()
    return plants
