"""
Base Service.

Base class for services. Services sit on top of stores, apply business
rules and log what they do. They never open database sessions
themselves.

Usage:
    from notesy.services.base import BaseService

    class NoteService(BaseService):
        def __init__(self, store: NoteStore) -> None:
            super().__init__()
            self.store = store
"""

from typing import Any

from notesy.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides a module-scoped logger and helpers that tag every record
    with the service name.
    """

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__module__)

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
