"""
Scribble Pad Service.

Get, replace and clear the single scribble drawing.
"""

from notesy.schemas.scribble import Scribble
from notesy.services.base import BaseService
from notesy.stores.scribble import ScribbleStore


class ScribblePadService(BaseService):
    """Thin service over the scribble store; no ordering, no undo."""

    def __init__(self, store: ScribbleStore) -> None:
        super().__init__()
        self.store = store

    async def get_scribble(self) -> Scribble:
        """
        Raises:
            NotFoundError: If no scribble was stored
        """
        return await self.store.get_scribble()

    async def store_scribble(self, scribble: Scribble) -> None:
        self._log_operation("Storing scribble", strokes=len(scribble.strokes))
        await self.store.store_scribble(scribble)

    async def delete_scribble(self) -> None:
        self._log_operation("Deleting scribble")
        await self.store.delete_scribble()
