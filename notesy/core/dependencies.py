"""
Shared Dependencies.

Wires stores and services from configuration. Entry points (CLI commands,
the interactive shell) get their collaborators here instead of building
them by hand.

Usage:
    from notesy.core.dependencies import get_note_service

    service = get_note_service()
    note = await service.get_note(note_id)
"""

from functools import lru_cache

from notesy.core.config import get_app_config
from notesy.core.database import get_session_factory
from notesy.events.publishers import NoteEventPublisher
from notesy.schemas.order import NoteOrder
from notesy.services.note import NoteService
from notesy.services.notes_state import NotesStateCoordinator
from notesy.services.scribble import ScribblePadService
from notesy.services.undo import UndoBuffer
from notesy.stores.note import SqlNoteStore
from notesy.stores.scribble import SqlScribbleStore


@lru_cache
def get_note_store() -> SqlNoteStore:
    """Process-wide note store, so every reader shares one change feed."""
    return SqlNoteStore(get_session_factory())


def get_note_service() -> NoteService:
    publisher = NoteEventPublisher() if get_app_config().features.events_publish_enabled else None
    return NoteService(get_note_store(), publisher=publisher)


def get_scribble_service() -> ScribblePadService:
    return ScribblePadService(SqlScribbleStore(get_session_factory()))


def get_default_order() -> NoteOrder:
    configured = get_app_config().notes.default_order
    return NoteOrder(field=configured.field, direction=configured.direction)


def create_notes_coordinator(order: NoteOrder | None = None) -> NotesStateCoordinator:
    """Build a coordinator using the configured default order and undo window."""
    return NotesStateCoordinator(
        get_note_service(),
        order=order or get_default_order(),
        undo_buffer=UndoBuffer(get_app_config().notes.undo_window_seconds),
    )
