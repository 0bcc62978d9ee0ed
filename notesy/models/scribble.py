"""
Scribble Model.

Single-slot table holding the scribble pad drawing as JSON.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from notesy.models.base import Base, TimestampMixin

SCRIBBLE_SLOT = "default"


class ScribbleRecord(TimestampMixin, Base):
    """Scribble database model. At most one row, keyed by SCRIBBLE_SLOT."""

    __tablename__ = "scribbles"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=SCRIBBLE_SLOT)
    payload: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<ScribbleRecord(id={self.id}, updated_at={self.updated_at})>"
