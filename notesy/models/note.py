"""
Note Model.

Database record for a note.
"""

from sqlalchemy import BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from notesy.models.base import Base, UUIDMixin


class NoteRecord(UUIDMixin, Base):
    """
    Note database model.

    The row mirrors the Note value one to one. ``timestamp`` is owned by
    the note itself (epoch milliseconds) and is never touched by the
    database layer, so a restored note keeps its original value.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        index=True,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    color: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=0,
    )
    timestamp: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<NoteRecord(id={self.id}, title={self.title!r})>"
