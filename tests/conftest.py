"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Test Database Configuration:
    Tests use an in-memory SQLite database, created fresh for every test.
    To test against another database, set the TEST_DATABASE_URL environment
    variable to an async SQLAlchemy URL.
"""

import logging
import os
from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from notesy.models import Base
from notesy.schemas.note import Note
from notesy.services.note import NoteService
from notesy.stores.note import SqlNoteStore
from notesy.stores.scribble import SqlScribbleStore


# =============================================================================
# Database Configuration
# =============================================================================


def get_test_database_url() -> str:
    """
    Get the test database URL.

    Returns TEST_DATABASE_URL if set, otherwise uses in-memory SQLite.
    """
    return os.environ.get(
        "TEST_DATABASE_URL",
        "sqlite+aiosqlite:///:memory:",
    )


def is_sqlite() -> bool:
    """Check if using SQLite database."""
    return "sqlite" in get_test_database_url()


# =============================================================================
# Database Engine Fixtures
# =============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Create the test database engine with all tables.

    For SQLite, StaticPool keeps the single in-memory connection alive
    so every session sees the same database.
    """
    url = get_test_database_url()

    if is_sqlite():
        engine = create_async_engine(
            url,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the test engine."""
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(
    db_session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a database session for a single test.

    Changes are rolled back after the test.
    """
    async with db_session_factory() as session:
        yield session
        await session.rollback()


# =============================================================================
# Store and Service Fixtures
# =============================================================================


@pytest.fixture
def note_store(db_session_factory: async_sessionmaker[AsyncSession]) -> SqlNoteStore:
    return SqlNoteStore(db_session_factory)


@pytest.fixture
def scribble_store(db_session_factory: async_sessionmaker[AsyncSession]) -> SqlScribbleStore:
    return SqlScribbleStore(db_session_factory)


@pytest.fixture
def note_service(note_store: SqlNoteStore) -> NoteService:
    return NoteService(note_store)


@pytest.fixture
def make_note():
    """Factory for notes with readable defaults."""

    def _make(
        title: str = "Note",
        content: str = "",
        color: int = 0,
        timestamp: int = 1_700_000_000_000,
        id: str = "",
    ) -> Note:
        return Note(id=id, title=title, content=content, color=color, timestamp=timestamp)

    return _make


# =============================================================================
# Logging Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_root_logger():
    """
    Undo setup_logging() side effects.

    CLI invocations configure logging against the runner's temporary
    streams; drop those handlers and restore the level after each test.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
