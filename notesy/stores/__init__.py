from notesy.stores.changes import ChangeFeed, ChangeSubscription
from notesy.stores.note import NoteStore, SqlNoteStore
from notesy.stores.scribble import ScribbleStore, SqlScribbleStore

__all__ = [
    "ChangeFeed",
    "ChangeSubscription",
    "NoteStore",
    "ScribbleStore",
    "SqlNoteStore",
    "SqlScribbleStore",
]
