"""
Undo Buffer.

Single-slot holder for the most recently deleted note.

    Empty --hold--> Holding(note) --take/clear/expire--> Empty
    Holding(a) --hold(b)--> Holding(b)    (a is dropped for good)

All transitions are plain synchronous methods, so on one event loop they
never interleave with each other.
"""

import asyncio

from notesy.core.logging import get_logger
from notesy.schemas.note import Note

logger = get_logger(__name__)


class UndoBuffer:
    """
    Holds at most one deleted note for a bounded time.

    Args:
        window_seconds: How long a held note stays restorable. ``None``
            keeps it until taken, cleared or replaced.
    """

    def __init__(self, window_seconds: float | None = None) -> None:
        self.window_seconds = window_seconds
        self._note: Note | None = None
        self._expiry: asyncio.TimerHandle | None = None

    @property
    def note(self) -> Note | None:
        return self._note

    @property
    def is_holding(self) -> bool:
        return self._note is not None

    def hold(self, note: Note) -> None:
        """Keep ``note`` for restore, replacing anything held before."""
        if self._note is not None:
            logger.debug(
                "Undo slot overwritten",
                extra={"dropped_note_id": self._note.id, "note_id": note.id},
            )
        self._cancel_expiry()
        self._note = note
        if self.window_seconds is not None:
            loop = asyncio.get_running_loop()
            self._expiry = loop.call_later(self.window_seconds, self._expire, note)

    def take(self) -> Note | None:
        """Remove and return the held note, or None when empty."""
        note = self._note
        self.clear()
        return note

    def restore_if_empty(self, note: Note) -> bool:
        """
        Put ``note`` back after a failed restore.

        Does nothing when a newer delete already filled the slot.
        """
        if self._note is not None:
            return False
        self.hold(note)
        return True

    def clear(self) -> None:
        self._cancel_expiry()
        self._note = None

    def _expire(self, note: Note) -> None:
        self._expiry = None
        if self._note is note:
            logger.debug("Undo window elapsed", extra={"note_id": note.id})
            self._note = None

    def _cancel_expiry(self) -> None:
        if self._expiry is not None:
            self._expiry.cancel()
            self._expiry = None
