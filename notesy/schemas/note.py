"""
Note Schemas.

Pydantic value types for notes as they move between stores, services
and the presentation layer.
"""

from pydantic import BaseModel, ConfigDict, Field

from notesy.core.utils import now_millis


class Note(BaseModel):
    """
    A user-authored note.

    Immutable: changes are made by building a new value with
    ``model_copy(update=...)`` and upserting it. An empty ``id`` means the
    note has not been stored yet.
    """

    id: str = Field(default="", description="Note unique identifier, empty until stored")
    title: str = Field(default="", description="Note title", examples=["Groceries"])
    content: str = Field(default="", description="Note content", examples=["Milk, eggs"])
    color: int = Field(default=0, description="ARGB display color")
    timestamp: int = Field(
        default_factory=now_millis,
        description="Creation or last modification time, epoch milliseconds",
    )

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @property
    def is_new(self) -> bool:
        return not self.id


class NoteCreate(BaseModel):
    """Input accepted when composing a note from the command line."""

    title: str = Field(default="", max_length=255, description="Note title")
    content: str = Field(default="", max_length=10000, description="Note content")
    color: int = Field(default=0, ge=0, le=0xFFFFFFFF, description="ARGB display color")

    def to_note(self) -> Note:
        return Note(title=self.title, content=self.content, color=self.color)
