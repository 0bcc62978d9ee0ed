"""
Base Store.

Base class for durable store adapters. A store opens one session per
operation, commits it, and converts SQLAlchemy failures into
application exceptions at this single boundary.

Usage:
    from notesy.stores.base import BaseStore

    class NoteStore(BaseStore):
        async def read(self, note_id: str) -> Note:
            async with self._session_scope("read_note") as session:
                record = await NoteRepository(session).get_by_id(note_id)
                return Note.model_validate(record)
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notesy.core.exceptions import ConflictError, DatabaseError
from notesy.core.logging import get_logger


class BaseStore:
    """
    Base class for all stores.

    Provides:
    - Session-per-operation management with commit/rollback
    - Error wrapping for database operations
    - Logging helpers

    Subclasses should:
    - Call super().__init__(session_factory) in their __init__
    - Run every database access inside _session_scope()
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize the store with a session factory.

        Args:
            session_factory: Factory producing SQLAlchemy async sessions
        """
        self._session_factory = session_factory
        self._logger = get_logger(self.__class__.__module__)

    @asynccontextmanager
    async def _session_scope(self, operation: str) -> AsyncIterator[AsyncSession]:
        """
        Run a unit of work in its own session.

        Commits when the block exits cleanly, rolls back otherwise.
        Application exceptions raised inside the block pass through
        unchanged.

        Args:
            operation: Description of the operation for logging

        Raises:
            ConflictError: For unique constraint violations
            DatabaseError: For other database errors
        """
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                self._logger.warning(
                    "Database integrity error",
                    extra={"operation": operation, "error": str(e)},
                )
                error_str = str(e).lower()
                if "unique" in error_str or "duplicate" in error_str:
                    raise ConflictError("Resource already exists") from e
                raise DatabaseError(f"Database constraint violation: {operation}") from e
            except SQLAlchemyError as e:
                await session.rollback()
                self._logger.error(
                    "Database error",
                    extra={"operation": operation, "error": str(e)},
                )
                raise DatabaseError(f"Database operation failed: {operation}") from e
            except BaseException:
                await session.rollback()
                raise

    def _log_operation(self, operation: str, **context: Any) -> None:
        """Log a store operation with context."""
        self._logger.info(
            operation,
            extra={"store": self.__class__.__name__, "source": "store", **context},
        )

    def _log_debug(self, message: str, **context: Any) -> None:
        """Log debug information."""
        self._logger.debug(
            message,
            extra={"store": self.__class__.__name__, "source": "store", **context},
        )
