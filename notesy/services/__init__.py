from notesy.services.note import NoteService
from notesy.services.notes_state import (
    DeleteNote,
    DismissRestore,
    NotesEvent,
    NotesState,
    NotesStateCoordinator,
    OrderNotes,
    RestoreNote,
)
from notesy.services.ordering import order_notes
from notesy.services.scribble import ScribblePadService
from notesy.services.undo import UndoBuffer

__all__ = [
    "DeleteNote",
    "DismissRestore",
    "NoteService",
    "NotesEvent",
    "NotesState",
    "NotesStateCoordinator",
    "OrderNotes",
    "RestoreNote",
    "ScribblePadService",
    "UndoBuffer",
    "order_notes",
]
