# Importing the records registers their tables on Base.metadata
from notesy.models.base import Base
from notesy.models.note import NoteRecord
from notesy.models.scribble import SCRIBBLE_SLOT, ScribbleRecord

__all__ = ["Base", "NoteRecord", "SCRIBBLE_SLOT", "ScribbleRecord"]
