"""
Event Schemas.

Standardized event envelope and note event types.
All events published through the event bus use the EventEnvelope base.

Naming convention for event_type: domain.entity.action (dot notation)
Stream naming convention: {domain}:{event-type} (colon-separated)

Usage:
    from notesy.events.schemas import NoteInserted

    event = NoteInserted(
        source="note-service",
        payload={"note_id": note.id, "title": note.title},
    )
"""

from uuid import uuid4

from pydantic import BaseModel, Field

from notesy.core.utils import utc_now


class EventEnvelope(BaseModel):
    """Base event envelope. All events inherit from this.

    Fields:
        event_id: Unique event identifier (auto-generated UUID)
        event_type: Domain event type in dot notation (e.g. notes.note.inserted)
        event_version: Schema version for forward compatibility
        timestamp: ISO 8601 UTC timestamp
        source: Service/module that published the event
        correlation_id: Groups events caused by one user action
        payload: Event-specific data
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    event_type: str
    event_version: int = 1
    timestamp: str = Field(default_factory=lambda: utc_now().isoformat())
    source: str
    correlation_id: str = Field(default_factory=lambda: str(uuid4()))
    payload: dict


class NoteInserted(EventEnvelope):
    """Published when a note is created, replaced or restored."""

    event_type: str = "notes.note.inserted"


class NoteDeleted(EventEnvelope):
    """Published when a note is removed."""

    event_type: str = "notes.note.deleted"
