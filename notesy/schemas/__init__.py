# Pydantic schemas package
from notesy.schemas.note import Note, NoteCreate
from notesy.schemas.order import NoteOrder, OrderDirection, OrderField, note_order_from_str
from notesy.schemas.scribble import Point, Scribble, Stroke

__all__ = [
    "Note",
    "NoteCreate",
    "NoteOrder",
    "OrderDirection",
    "OrderField",
    "Point",
    "Scribble",
    "Stroke",
    "note_order_from_str",
]
