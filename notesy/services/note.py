"""
Note Service.

Live, ordered view of the notes plus single-note reads and writes.
Sits between the note store and the presentation layer; owns no note
data, only the store subscription and the ordering applied to each
snapshot.
"""

from collections.abc import AsyncIterator

from notesy.core.exceptions import ApplicationError, ExternalServiceError, NotFoundError
from notesy.events.publishers import NoteEventPublisher
from notesy.schemas.note import Note
from notesy.schemas.order import NoteOrder
from notesy.services.base import BaseService
from notesy.services.ordering import order_notes
from notesy.stores.note import NoteStore


class NoteService(BaseService):
    """
    Service for note business logic.

    Store failures propagate to the caller unchanged; nothing is retried.
    """

    def __init__(
        self,
        store: NoteStore,
        publisher: NoteEventPublisher | None = None,
    ) -> None:
        super().__init__()
        self.store = store
        self.publisher = publisher

    async def observe_notes(self, order: NoteOrder) -> AsyncIterator[list[Note]]:
        """
        Stream ordered snapshots of all notes.

        Yields the current snapshot immediately, then a fresh one after
        every change signalled by the store. A failed read is logged and
        skipped; the stream keeps its subscription and tries again on the
        next signal. The stream never ends on its own; close it
        (``aclose()`` or cancelling the consuming task) to release the
        store subscription.

        Args:
            order: Ordering applied to every snapshot
        """
        # subscribe before the first read so no change can slip in between
        async with self.store.changes() as changes:
            self._log_debug("Observing notes", order=str(order))
            snapshot = await self._read_snapshot(order)
            if snapshot is not None:
                yield snapshot
            async for _ in changes:
                snapshot = await self._read_snapshot(order)
                if snapshot is not None:
                    yield snapshot

    async def _read_snapshot(self, order: NoteOrder) -> list[Note] | None:
        try:
            notes = await self.store.list_all()
        except ApplicationError as e:
            self._logger.warning(
                "Note snapshot read failed",
                extra={"order": str(order), "error": e.message, "code": e.code},
            )
            return None
        return order_notes(notes, order)

    async def get_note(self, note_id: str) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If no live note has this ID
        """
        if not note_id:
            raise NotFoundError("Note not found")
        return await self.store.read(note_id)

    async def insert_note(self, note: Note) -> Note:
        """
        Create or replace a note.

        A note without an ID is created with a fresh one. A note with an
        ID replaces the stored record, or recreates it under the same ID
        if it was deleted.

        Returns:
            The stored note, with its ID
        """
        self._log_operation("Inserting note", note_id=note.id or None)

        note_id = await self.store.create(note)
        stored = note.model_copy(update={"id": note_id})

        if self.publisher is not None:
            try:
                await self.publisher.note_inserted(note_id=note_id, title=stored.title)
            except ExternalServiceError as e:
                self._log_publish_failure("note_inserted", note_id, e)

        self._log_debug("Note inserted", note_id=note_id)
        return stored

    async def delete_note(self, note: Note) -> None:
        """
        Delete a note.

        Deleting a note that is already gone is a no-op.
        """
        if note.is_new:
            self._log_debug("Delete skipped, note was never stored")
            return

        self._log_operation("Deleting note", note_id=note.id)
        await self.store.delete(note.id)

        if self.publisher is not None:
            try:
                await self.publisher.note_deleted(note_id=note.id)
            except ExternalServiceError as e:
                self._log_publish_failure("note_deleted", note.id, e)

    def _log_publish_failure(self, event: str, note_id: str, error: ExternalServiceError) -> None:
        # the mutation is committed and stands even when its event is lost
        self._logger.warning(
            "Note event not published",
            extra={"source": "events", "event": event, "note_id": note_id, "error": error.message},
        )
