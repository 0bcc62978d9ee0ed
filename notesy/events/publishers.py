"""
Event Publishers.

Note event publisher. Wraps the broker's publish() method with the
correct stream name and event schema.

The publisher checks the events_publish_enabled feature flag before
publishing. When disabled, events are silently skipped.

Usage:
    from notesy.events.publishers import NoteEventPublisher

    publisher = NoteEventPublisher()
    await publisher.note_inserted(note_id=note.id, title=note.title)
"""

from notesy.core.exceptions import ExternalServiceError
from notesy.core.logging import get_logger
from notesy.events.schemas import EventEnvelope, NoteDeleted, NoteInserted

logger = get_logger(__name__)


class NoteEventPublisher:
    """Publishes note domain events to Redis Streams."""

    STREAM_INSERTED = "notes:note-inserted"
    STREAM_DELETED = "notes:note-deleted"

    async def note_inserted(self, note_id: str, title: str) -> None:
        """Publish a notes.note.inserted event."""
        await self._publish(
            self.STREAM_INSERTED,
            NoteInserted(
                source="note-service",
                payload={"note_id": note_id, "title": title},
            ),
        )

    async def note_deleted(self, note_id: str) -> None:
        """Publish a notes.note.deleted event."""
        await self._publish(
            self.STREAM_DELETED,
            NoteDeleted(
                source="note-service",
                payload={"note_id": note_id},
            ),
        )

    async def _publish(self, stream: str, event: EventEnvelope) -> None:
        """Publish an event if the feature flag is enabled."""
        from notesy.core.config import get_app_config

        if not get_app_config().features.events_publish_enabled:
            return

        from notesy.events.broker import get_event_broker

        broker = get_event_broker()
        try:
            await broker.connect()
            await broker.publish(event.model_dump(), channel=stream)
        except (ConnectionError, TimeoutError) as e:
            raise ExternalServiceError(f"Event broker unavailable: {e}") from e

        logger.debug(
            "Event published",
            extra={
                "source": "events",
                "stream": stream,
                "event_type": event.event_type,
                "event_id": event.event_id,
            },
        )
