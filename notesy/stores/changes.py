"""
Change Feed.

In-process "record set changed" signals. A store owns one feed and calls
``notify()`` after every committed mutation; readers hold a subscription
and re-read the full record set after each signal.

Signals carry no payload and are conflated: several notifications that
arrive before a subscriber wakes up are delivered as one.

Usage:
    async with store.changes() as changes:
        async for _ in changes:
            notes = await store.list_all()
"""

import asyncio

from notesy.core.logging import get_logger

logger = get_logger(__name__)


class ChangeSubscription:
    """A single reader's view of a ChangeFeed. Async-iterable until closed."""

    def __init__(self, feed: "ChangeFeed") -> None:
        self._feed = feed
        self._pending = asyncio.Event()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def signal(self) -> None:
        self._pending.set()

    def close(self) -> None:
        """Stop delivery and release the subscription. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        self._feed.discard(self)
        # wake a reader blocked in __anext__ so it can finish
        self._pending.set()

    def __aiter__(self) -> "ChangeSubscription":
        return self

    async def __anext__(self) -> None:
        if self._closed:
            raise StopAsyncIteration
        await self._pending.wait()
        self._pending.clear()
        if self._closed:
            raise StopAsyncIteration
        return None

    async def __aenter__(self) -> "ChangeSubscription":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()


class ChangeFeed:
    """Fan-out of change signals to every open subscription."""

    def __init__(self, name: str = "changes") -> None:
        self.name = name
        self._subscribers: set[ChangeSubscription] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> ChangeSubscription:
        subscription = ChangeSubscription(self)
        self._subscribers.add(subscription)
        logger.debug(
            "Change subscription opened",
            extra={"feed": self.name, "subscribers": len(self._subscribers)},
        )
        return subscription

    def discard(self, subscription: ChangeSubscription) -> None:
        self._subscribers.discard(subscription)
        logger.debug(
            "Change subscription closed",
            extra={"feed": self.name, "subscribers": len(self._subscribers)},
        )

    def notify(self) -> None:
        """Signal every subscriber that the record set changed."""
        for subscription in list(self._subscribers):
            subscription.signal()
