"""
Note Store.

Durable storage contract for notes and its SQLAlchemy implementation.
Every committed mutation signals the store's change feed; failed
mutations signal nothing.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notesy.models.base import new_id
from notesy.repositories.note import NoteRepository
from notesy.schemas.note import Note
from notesy.stores.base import BaseStore
from notesy.stores.changes import ChangeFeed, ChangeSubscription


class NoteStore(Protocol):
    """What the notes service needs from durable storage."""

    async def create(self, note: Note) -> str:
        """Upsert ``note``; assign a fresh id when it has none. Returns the id."""
        ...

    async def read(self, note_id: str) -> Note:
        """Return the note or raise NotFoundError."""
        ...

    async def delete(self, note_id: str) -> None:
        """Remove the note if present. Never fails on a missing id."""
        ...

    def changes(self) -> ChangeSubscription:
        """Subscribe to record-set-changed signals."""
        ...

    async def list_all(self) -> list[Note]:
        """Return every stored note."""
        ...


class SqlNoteStore(BaseStore):
    """NoteStore backed by the ``notes`` table."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        feed: ChangeFeed | None = None,
    ) -> None:
        super().__init__(session_factory)
        self._feed = feed or ChangeFeed("notes")

    async def create(self, note: Note) -> str:
        if note.is_new:
            note = note.model_copy(update={"id": new_id()})

        async with self._session_scope("create_note") as session:
            await NoteRepository(session).save(note)

        self._log_debug("Note stored", note_id=note.id)
        self._feed.notify()
        return note.id

    async def read(self, note_id: str) -> Note:
        async with self._session_scope("read_note") as session:
            record = await NoteRepository(session).get_by_id(note_id)
            return Note.model_validate(record)

    async def delete(self, note_id: str) -> None:
        async with self._session_scope("delete_note") as session:
            removed = await NoteRepository(session).delete_by_id(note_id)

        if not removed:
            self._log_debug("Delete skipped, note absent", note_id=note_id)
            return

        self._log_debug("Note removed", note_id=note_id)
        self._feed.notify()

    def changes(self) -> ChangeSubscription:
        return self._feed.subscribe()

    async def list_all(self) -> list[Note]:
        async with self._session_scope("list_notes") as session:
            records = await NoteRepository(session).list_all()
            return [Note.model_validate(record) for record in records]
