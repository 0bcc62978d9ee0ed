"""
Note Repository.

Data access layer for notes. Handles all database operations
for the NoteRecord model.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notesy.models.note import NoteRecord
from notesy.repositories.base import BaseRepository
from notesy.schemas.note import Note


class NoteRepository(BaseRepository[NoteRecord]):
    """
    Repository for NoteRecord.

    Inherits standard CRUD operations from BaseRepository
    and adds note-specific helpers.
    """

    model = NoteRecord

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def list_all(self) -> list[NoteRecord]:
        """
        Get every stored note in insertion order.

        Display ordering is applied above the store, so the only
        guarantee here is a stable order between calls.
        """
        result = await self.session.execute(
            select(NoteRecord).order_by(NoteRecord.timestamp, NoteRecord.id)
        )
        return list(result.scalars().all())

    async def save(self, note: Note) -> NoteRecord:
        """
        Store the full note value, replacing any record with the same ID.

        Args:
            note: Note with a non-empty id

        Returns:
            The stored record
        """
        return await self.upsert(
            id=note.id,
            title=note.title,
            content=note.content,
            color=note.color,
            timestamp=note.timestamp,
        )

