"""
Scribble Store.

Single-slot storage for the scribble pad drawing.
"""

from typing import Protocol

from notesy.repositories.scribble import ScribbleRepository
from notesy.schemas.scribble import Scribble
from notesy.stores.base import BaseStore


class ScribbleStore(Protocol):
    async def get_scribble(self) -> Scribble:
        ...

    async def store_scribble(self, scribble: Scribble) -> None:
        ...

    async def delete_scribble(self) -> None:
        ...


class SqlScribbleStore(BaseStore):
    """ScribbleStore backed by the one-row ``scribbles`` table."""

    async def get_scribble(self) -> Scribble:
        """
        Load the stored drawing.

        Raises:
            NotFoundError: If the slot is empty
        """
        async with self._session_scope("get_scribble") as session:
            record = await ScribbleRepository(session).get_slot()
            return Scribble.model_validate_json(record.payload)

    async def store_scribble(self, scribble: Scribble) -> None:
        """Replace the stored drawing."""
        async with self._session_scope("store_scribble") as session:
            await ScribbleRepository(session).put_slot(scribble.model_dump_json())
        self._log_debug("Scribble stored", strokes=len(scribble.strokes))

    async def delete_scribble(self) -> None:
        """Clear the slot. Clearing an empty slot is a no-op."""
        async with self._session_scope("delete_scribble") as session:
            removed = await ScribbleRepository(session).clear_slot()
        self._log_debug("Scribble cleared", removed=removed)
