"""
Note Ordering.

Pure, deterministic sorting of a note collection by a NoteOrder.
"""

from collections.abc import Callable, Iterable
from operator import attrgetter
from typing import Any

from notesy.schemas.note import Note
from notesy.schemas.order import NoteOrder, OrderField

_SORT_KEYS: dict[OrderField, Callable[[Note], Any]] = {
    OrderField.TITLE: attrgetter("title"),
    OrderField.DATE: attrgetter("timestamp"),
    OrderField.COLOR: attrgetter("color"),
}


def order_notes(notes: Iterable[Note], order: NoteOrder) -> list[Note]:
    """
    Return ``notes`` sorted by ``order`` as a new list.

    Titles compare case-sensitively, dates by timestamp, colors by their
    integer value. Descending flips the comparison rather than the result,
    so notes with equal keys keep their input order in both directions.
    """
    return sorted(notes, key=_SORT_KEYS[order.field], reverse=order.descending)
