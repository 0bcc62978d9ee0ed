"""
Unit Test Fixtures.

Fixtures for unit tests - stores and configuration are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from notesy.stores.changes import ChangeFeed


# =============================================================================
# Store Mock Fixtures
# =============================================================================


@pytest.fixture
def change_feed() -> ChangeFeed:
    return ChangeFeed("test")


@pytest.fixture
def mock_note_store(change_feed: ChangeFeed) -> MagicMock:
    """
    Mock NoteStore.

    ``changes()`` hands out real subscriptions on ``change_feed`` so tests
    can drive notifications with ``change_feed.notify()``.

    Usage:
        def test_service(mock_note_store):
            mock_note_store.list_all.return_value = [note]
            service = NoteService(mock_note_store)
    """
    store = MagicMock()
    store.create = AsyncMock(return_value="generated-id")
    store.read = AsyncMock()
    store.delete = AsyncMock(return_value=None)
    store.list_all = AsyncMock(return_value=[])
    store.changes = MagicMock(side_effect=change_feed.subscribe)
    return store


# =============================================================================
# Settings Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_app_config() -> MagicMock:
    """
    Mock YAML application configuration.

    Usage:
        def test_with_config(mock_app_config):
            with patch("module.get_app_config", return_value=mock_app_config):
                # Test code that uses app config
    """
    config = MagicMock()
    config.features.events_publish_enabled = False
    config.notes.default_order.field = "date"
    config.notes.default_order.direction = "descending"
    config.notes.undo_window_seconds = 4.0
    return config


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.logger", mock_logger):
                # Test code that logs
                mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
