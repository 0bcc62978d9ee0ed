"""
Note Order Schemas.

A note order is a sort field crossed with a direction. Both halves are
enums, so only the six meaningful combinations can be expressed.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from notesy.core.exceptions import ValidationError


class OrderField(str, Enum):
    """Note attribute the list is sorted by."""

    TITLE = "title"
    DATE = "date"
    COLOR = "color"


class OrderDirection(str, Enum):
    """Sort direction."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


_DIRECTION_ALIASES = {
    "asc": OrderDirection.ASCENDING,
    "ascending": OrderDirection.ASCENDING,
    "desc": OrderDirection.DESCENDING,
    "descending": OrderDirection.DESCENDING,
}


class NoteOrder(BaseModel):
    """Active ordering of the note list."""

    field: OrderField = OrderField.DATE
    direction: OrderDirection = OrderDirection.DESCENDING

    model_config = ConfigDict(frozen=True)

    @property
    def descending(self) -> bool:
        return self.direction is OrderDirection.DESCENDING

    def with_direction(self, direction: OrderDirection) -> "NoteOrder":
        """Return the same field sorted in another direction."""
        return NoteOrder(field=self.field, direction=direction)

    def __str__(self) -> str:
        return f"{self.field.value}:{self.direction.value}"


def note_order_from_str(
    value: str,
    direction: OrderDirection = OrderDirection.DESCENDING,
) -> NoteOrder:
    """
    Parse a user-facing order label.

    Accepts a bare field name ("Title", "date") combined with the given
    default direction, or "field:direction" ("title:asc", "color:descending").

    Raises:
        ValidationError: If the field or direction is not recognized
    """
    field_part, _, direction_part = value.strip().lower().partition(":")

    try:
        field = OrderField(field_part)
    except ValueError:
        raise ValidationError(
            f"Unknown note order: {value!r}",
            details={"allowed_fields": [f.value for f in OrderField]},
        ) from None

    if direction_part:
        if direction_part not in _DIRECTION_ALIASES:
            raise ValidationError(
                f"Unknown order direction: {direction_part!r}",
                details={"allowed_directions": sorted(_DIRECTION_ALIASES)},
            )
        direction = _DIRECTION_ALIASES[direction_part]

    return NoteOrder(field=field, direction=direction)
