"""
End-to-end note list flows: coordinator, service and SQL store together.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from notesy.events.publishers import NoteEventPublisher
from notesy.schemas.order import NoteOrder, OrderDirection, OrderField
from notesy.services.note import NoteService
from notesy.services.notes_state import (
    DeleteNote,
    NotesStateCoordinator,
    OrderNotes,
    RestoreNote,
)
from notesy.services.undo import UndoBuffer

TITLE_ASC = NoteOrder(field=OrderField.TITLE, direction=OrderDirection.ASCENDING)
DATE_DESC = NoteOrder(field=OrderField.DATE, direction=OrderDirection.DESCENDING)


async def wait_for_state(coordinator, predicate, timeout=2.0):
    async def _wait():
        async for state in coordinator.states():
            if predicate(state):
                return state

    return await asyncio.wait_for(_wait(), timeout=timeout)


def titles(state):
    return [note.title for note in state.notes]


@pytest.fixture
async def coordinator(note_service):
    coordinator = NotesStateCoordinator(note_service, order=TITLE_ASC)
    yield coordinator
    await coordinator.close()


@pytest.fixture
async def seeded(note_service, make_note):
    """Two stored notes: "B" (older) and "A" (newer)."""
    b = await note_service.insert_note(make_note(title="B", timestamp=1))
    a = await note_service.insert_note(make_note(title="A", timestamp=2))
    return a, b


class TestObserve:
    @pytest.mark.asyncio
    async def test_snapshot_without_mutation(self, coordinator, seeded):
        await coordinator.start()

        state = await wait_for_state(coordinator, lambda s: len(s.notes) == 2)

        assert titles(state) == ["A", "B"]

    @pytest.mark.asyncio
    async def test_insert_is_observed(self, coordinator, note_service, make_note):
        await coordinator.start()
        await wait_for_state(coordinator, lambda s: True)

        await note_service.insert_note(make_note(title="Fresh"))

        state = await wait_for_state(coordinator, lambda s: s.notes)
        assert titles(state) == ["Fresh"]

    @pytest.mark.asyncio
    async def test_order_change_re_sorts_same_notes(self, coordinator, seeded):
        await coordinator.start()
        await wait_for_state(coordinator, lambda s: len(s.notes) == 2)

        await coordinator.on_event(OrderNotes(DATE_DESC))
        state = await wait_for_state(coordinator, lambda s: s.order == DATE_DESC)

        assert titles(state) == ["A", "B"]

        await coordinator.on_event(OrderNotes(NoteOrder(field=OrderField.DATE, direction=OrderDirection.ASCENDING)))
        state = await wait_for_state(coordinator, lambda s: s.order.direction is OrderDirection.ASCENDING)

        assert titles(state) == ["B", "A"]

    @pytest.mark.asyncio
    async def test_two_observers_see_same_change(self, note_service, make_note):
        first = NotesStateCoordinator(note_service, order=TITLE_ASC)
        second = NotesStateCoordinator(note_service, order=DATE_DESC)
        try:
            for coordinator in (first, second):
                await coordinator.start()
                await wait_for_state(coordinator, lambda s: True)

            await note_service.insert_note(make_note(title="Shared"))

            for coordinator in (first, second):
                state = await wait_for_state(coordinator, lambda s: s.notes)
                assert titles(state) == ["Shared"]
        finally:
            await first.close()
            await second.close()


class TestDeleteRestore:
    @pytest.mark.asyncio
    async def test_restore_brings_back_identical_note(self, coordinator, note_service, seeded):
        a, _ = seeded
        await coordinator.start()
        await wait_for_state(coordinator, lambda s: len(s.notes) == 2)

        await coordinator.on_event(DeleteNote(a))
        state = await wait_for_state(coordinator, lambda s: len(s.notes) == 1)
        assert titles(state) == ["B"]

        await coordinator.on_event(RestoreNote())
        state = await wait_for_state(coordinator, lambda s: len(s.notes) == 2)

        assert titles(state) == ["A", "B"]
        assert await note_service.get_note(a.id) == a

    @pytest.mark.asyncio
    async def test_only_last_delete_restores(self, coordinator, note_service, seeded):
        a, b = seeded

        await coordinator.on_event(DeleteNote(a))
        await coordinator.on_event(DeleteNote(b))
        await coordinator.on_event(RestoreNote())
        await coordinator.on_event(RestoreNote())

        remaining = await note_service.store.list_all()
        assert [note.id for note in remaining] == [b.id]

    @pytest.mark.asyncio
    async def test_restore_after_window_does_nothing(self, note_service, seeded):
        a, _ = seeded
        coordinator = NotesStateCoordinator(note_service, undo_buffer=UndoBuffer(window_seconds=0.01))

        await coordinator.on_event(DeleteNote(a))
        await asyncio.sleep(0.05)

        assert await coordinator.on_event(RestoreNote()) is None
        assert len(await note_service.store.list_all()) == 1


class TestEventsUnavailable:
    @pytest.fixture
    def unreachable_broker(self):
        config = MagicMock()
        config.features.events_publish_enabled = True
        broker = AsyncMock()
        broker.connect.side_effect = ConnectionError("connection refused")
        with patch("notesy.core.config.get_app_config", return_value=config), \
             patch("notesy.events.broker.get_event_broker", return_value=broker):
            yield broker

    @pytest.mark.asyncio
    async def test_delete_and_restore_survive_broker_outage(
        self, unreachable_broker, note_store, seeded
    ):
        a, _ = seeded
        service = NoteService(note_store, publisher=NoteEventPublisher())
        coordinator = NotesStateCoordinator(service)

        await coordinator.on_event(DeleteNote(a))
        assert coordinator.undo_buffer.note == a

        assert await coordinator.on_event(RestoreNote()) == a
        assert await service.get_note(a.id) == a
        assert not coordinator.undo_buffer.is_holding
        unreachable_broker.publish.assert_not_called()
