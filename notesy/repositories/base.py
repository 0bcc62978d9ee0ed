"""
Base Repository.

Base class for all repositories with common CRUD operations.
Repositories are bound to one session; committing is the caller's job.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from notesy.core.exceptions import NotFoundError
from notesy.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    Subclasses should set the model class:

        class NoteRepository(BaseRepository[NoteRecord]):
            model = NoteRecord
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, id: str) -> ModelType:
        """
        Get a single record by ID.

        Raises:
            NotFoundError: If record not found
        """
        instance = await self.get_by_id_or_none(id)

        if instance is None:
            raise NotFoundError(f"{self.model.__name__} not found")

        return instance

    async def get_by_id_or_none(self, id: str) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def upsert(self, **kwargs: Any) -> ModelType:
        """
        Insert a record, or replace the stored one with the same primary key.

        Columns not passed keep their stored value (or default, for new rows).
        """
        instance = await self.session.merge(self.model(**kwargs))
        await self.session.flush()
        return instance

    async def delete_by_id(self, id: str) -> bool:
        """
        Delete a record by ID.

        Returns:
            True if a row was removed, False if none matched
        """
        result = await self.session.execute(
            delete(self.model).where(self.model.id == id)
        )
        await self.session.flush()
        return bool(result.rowcount)

