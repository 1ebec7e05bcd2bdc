"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Data access for one table model.

    Repositories never commit; the service layer owns the transaction.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: int) -> ModelType | None:
        """Get a record by its primary key, or None."""
        return await self.session.get(self.model, id)

    async def fetch_all(self, query: Any) -> list[ModelType]:
        """Run a select over this model and return every row."""
        result = await self.session.execute(query)
        return list(result.scalars().all())

    def add(self, entity: ModelType) -> None:
        """Stage a new record (no flush/commit)."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Stage a record for deletion (no commit)."""
        await self.session.delete(entity)
