"""
Notes State Coordinator.

Presentation-facing state holder for the note list. Consumers send
intents (order, delete, restore, dismiss) through ``on_event`` and read
the resulting NotesState from ``state`` or the ``states()`` stream.

Usage:
    coordinator = NotesStateCoordinator(note_service, undo_buffer=UndoBuffer(4.0))
    await coordinator.start()

    await coordinator.on_event(DeleteNote(note))
    await coordinator.on_event(RestoreNote())

    async for state in coordinator.states():
        render(state.notes)
"""

import asyncio
from collections.abc import AsyncIterator
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from notesy.core.logging import get_logger
from notesy.schemas.note import Note
from notesy.schemas.order import NoteOrder
from notesy.services.note import NoteService
from notesy.services.undo import UndoBuffer

logger = get_logger(__name__)


# =============================================================================
# Intents
# =============================================================================


class NotesEvent:
    """Base class for user intents on the note list."""


@dataclass(frozen=True)
class OrderNotes(NotesEvent):
    order: NoteOrder


@dataclass(frozen=True)
class DeleteNote(NotesEvent):
    note: Note


@dataclass(frozen=True)
class RestoreNote(NotesEvent):
    pass


@dataclass(frozen=True)
class DismissRestore(NotesEvent):
    """The restore affordance went away without being used."""


# =============================================================================
# State
# =============================================================================


class NotesState(BaseModel):
    """What the note list shows: the ordered notes and the active order."""

    notes: tuple[Note, ...] = ()
    order: NoteOrder = NoteOrder()

    model_config = ConfigDict(frozen=True)


class NotesStateCoordinator:
    """
    Owns the active order, the live note subscription and the undo slot.

    Changing the order restarts the subscription, so the current notes
    are re-emitted in the new order even when nothing was stored.
    """

    def __init__(
        self,
        service: NoteService,
        order: NoteOrder | None = None,
        undo_buffer: UndoBuffer | None = None,
    ) -> None:
        self.service = service
        self.undo_buffer = undo_buffer or UndoBuffer()
        self._order = order or NoteOrder()
        self._state = NotesState(order=self._order)
        self._version = 0
        self._changed = asyncio.Condition()
        self._order_lock = asyncio.Lock()
        self._job: asyncio.Task | None = None

    @property
    def state(self) -> NotesState:
        return self._state

    @property
    def order(self) -> NoteOrder:
        return self._order

    @property
    def started(self) -> bool:
        return self._job is not None and not self._job.done()

    async def start(self) -> None:
        """Subscribe to the notes with the current order. Idempotent."""
        async with self._order_lock:
            if not self.started:
                await self._cancel_job()
                self._job = self._launch(self._order)

    async def close(self) -> None:
        """Drop the note subscription and forget any pending undo."""
        async with self._order_lock:
            await self._cancel_job()
        self.undo_buffer.clear()

    async def on_event(self, event: NotesEvent) -> Note | None:
        """
        Apply a user intent.

        Returns:
            The restored note for RestoreNote when one was restored,
            otherwise None
        """
        match event:
            case OrderNotes(order=order):
                await self._change_order(order)
            case DeleteNote(note=note):
                await self._delete(note)
            case RestoreNote():
                return await self._restore()
            case DismissRestore():
                self.undo_buffer.clear()
            case _:
                raise TypeError(f"Unsupported notes event: {event!r}")
        return None

    async def states(self) -> AsyncIterator[NotesState]:
        """
        Stream state updates, latest value first.

        Slow consumers skip intermediate states and always receive the
        newest one. Waits for the first snapshot when none arrived yet.
        """
        seen = 0
        while True:
            async with self._changed:
                await self._changed.wait_for(lambda: self._version != seen)
                seen = self._version
                state = self._state
            yield state

    async def _change_order(self, order: NoteOrder) -> None:
        async with self._order_lock:
            if order == self._order and self.started:
                return
            logger.info(
                "Note order changed",
                extra={"from": str(self._order), "to": str(order)},
            )
            await self._cancel_job()
            self._order = order
            self._job = self._launch(order)

    async def _delete(self, note: Note) -> None:
        await self.service.delete_note(note)
        self.undo_buffer.hold(note)

    async def _restore(self) -> Note | None:
        note = self.undo_buffer.take()
        if note is None:
            logger.debug("Restore ignored, nothing to restore")
            return None

        try:
            restored = await self.service.insert_note(note)
        except Exception:
            self.undo_buffer.restore_if_empty(note)
            raise

        logger.info("Note restored", extra={"note_id": restored.id})
        return restored

    def _launch(self, order: NoteOrder) -> asyncio.Task:
        return asyncio.create_task(self._collect(order), name=f"notes-{order}")

    async def _collect(self, order: NoteOrder) -> None:
        try:
            async for notes in self.service.observe_notes(order):
                await self._publish(NotesState(notes=tuple(notes), order=order))
        except Exception:
            logger.exception("Note subscription failed", extra={"order": str(order)})
            raise

    async def _publish(self, state: NotesState) -> None:
        async with self._changed:
            self._state = state
            self._version += 1
            self._changed.notify_all()

    async def _cancel_job(self) -> None:
        job, self._job = self._job, None
        if job is None:
            return
        job.cancel()
        try:
            await job
        except asyncio.CancelledError:
            pass
        except Exception as e:
            # already logged by _collect when the job failed
            logger.debug("Discarded failed note subscription", extra={"error": str(e)})
