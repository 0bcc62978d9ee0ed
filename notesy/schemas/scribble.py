"""
Scribble Schemas.

The scribble pad holds a single freeform drawing made of strokes.
It is stored and replaced as one unit.
"""

from pydantic import BaseModel, Field

from notesy.core.utils import now_millis


class Point(BaseModel):
    x: float
    y: float


class Stroke(BaseModel):
    """One continuous pen movement."""

    color: int = Field(default=0xFF000000, description="ARGB stroke color")
    width: float = Field(default=4.0, gt=0, description="Stroke width in pixels")
    points: list[Point] = Field(default_factory=list)


class Scribble(BaseModel):
    """The whole sketch."""

    strokes: list[Stroke] = Field(default_factory=list)
    timestamp: int = Field(default_factory=now_millis)

    @property
    def is_blank(self) -> bool:
        return not any(stroke.points for stroke in self.strokes)
