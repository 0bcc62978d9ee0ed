"""
Integration Test Fixtures.

Fixtures for integration tests - uses a real database and services.
These fixtures build on the root conftest.py database fixtures.
"""

from collections.abc import Iterator

import pytest

from notesy.core.config import get_app_config, get_settings
from notesy.core.dependencies import get_note_store


@pytest.fixture
def cli_database(tmp_path, monkeypatch) -> Iterator[str]:
    """
    Point the CLI at a throwaway SQLite file.

    Every CLI invocation opens and disposes its own engine, so only the
    cached settings need resetting around the test.
    """
    url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    get_note_store.cache_clear()
    yield url
    get_settings.cache_clear()
    get_app_config.cache_clear()
    get_note_store.cache_clear()
