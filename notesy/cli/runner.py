"""
Async Command Runner.

Typer commands are synchronous; this bridges them to the async services
and makes sure tables exist before and the engine is released after.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from notesy.core.database import dispose_engine, init_models
from notesy.core.dependencies import get_note_store
from notesy.events.broker import close_event_broker

T = TypeVar("T")


def run_with_database(operation: Callable[[], Awaitable[T]]) -> T:
    """Run ``operation`` on a fresh event loop with the database ready."""

    async def _main() -> T:
        try:
            await init_models()
            return await operation()
        finally:
            await close_event_broker()
            await dispose_engine()
            get_note_store.cache_clear()

    return asyncio.run(_main())
