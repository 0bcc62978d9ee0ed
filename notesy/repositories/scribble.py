"""
Scribble Repository.

Data access for the single scribble slot.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from notesy.core.exceptions import NotFoundError
from notesy.models.scribble import SCRIBBLE_SLOT, ScribbleRecord
from notesy.repositories.base import BaseRepository


class ScribbleRepository(BaseRepository[ScribbleRecord]):
    """Repository for the one-row scribbles table."""

    model = ScribbleRecord

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_slot(self) -> ScribbleRecord:
        """
        Get the stored scribble.

        Raises:
            NotFoundError: If nothing has been stored
        """
        record = await self.get_by_id_or_none(SCRIBBLE_SLOT)
        if record is None:
            raise NotFoundError("Scribble not found")
        return record

    async def put_slot(self, payload: str) -> ScribbleRecord:
        """Replace the stored scribble payload."""
        return await self.upsert(id=SCRIBBLE_SLOT, payload=payload)

    async def clear_slot(self) -> bool:
        """Remove the stored scribble. Returns False when already empty."""
        return await self.delete_by_id(SCRIBBLE_SLOT)
