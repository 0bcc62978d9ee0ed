"""
Event Broker.

FastStream RedisBroker setup with lazy initialization. Only created when
event publishing is enabled in features.yaml.

Usage:
    from notesy.events.broker import get_event_broker

    broker = get_event_broker()
"""

from faststream.redis import RedisBroker

from notesy.core.logging import get_logger

logger = get_logger(__name__)

_broker: RedisBroker | None = None


def create_event_broker() -> RedisBroker:
    """Create a new RedisBroker using the project's Redis URL."""
    from notesy.core.config import get_redis_url

    broker = RedisBroker(get_redis_url())
    logger.info("Event broker created", extra={"source": "events"})
    return broker


def get_event_broker() -> RedisBroker:
    """Get the shared event broker (lazy initialization)."""
    global _broker
    if _broker is None:
        _broker = create_event_broker()
    return _broker


async def close_event_broker() -> None:
    """Close the shared broker connection if one was opened."""
    global _broker
    if _broker is not None:
        await _broker.close()
        logger.debug("Event broker closed", extra={"source": "events"})
    _broker = None
