"""Unit tests for note order parsing and the Note value type."""

import pydantic
import pytest

from notesy.core.exceptions import ValidationError
from notesy.schemas.note import Note, NoteCreate
from notesy.schemas.order import NoteOrder, OrderDirection, OrderField, note_order_from_str


class TestNoteOrder:
    def test_default_is_date_descending(self):
        order = NoteOrder()
        assert order.field is OrderField.DATE
        assert order.direction is OrderDirection.DESCENDING
        assert order.descending is True

    def test_is_immutable(self):
        order = NoteOrder()
        with pytest.raises(pydantic.ValidationError):
            order.field = OrderField.TITLE

    def test_rejects_unknown_field(self):
        with pytest.raises(pydantic.ValidationError):
            NoteOrder(field="size")

    def test_equality_by_value(self):
        assert NoteOrder(field=OrderField.TITLE) == NoteOrder(field=OrderField.TITLE)
        assert NoteOrder(field=OrderField.TITLE) != NoteOrder(field=OrderField.COLOR)

    def test_with_direction_keeps_field(self):
        order = NoteOrder(field=OrderField.COLOR).with_direction(OrderDirection.ASCENDING)
        assert order == NoteOrder(field=OrderField.COLOR, direction=OrderDirection.ASCENDING)

    def test_str(self):
        assert str(NoteOrder(field=OrderField.TITLE, direction=OrderDirection.ASCENDING)) == "title:ascending"


class TestNoteOrderFromStr:
    def test_bare_field_uses_given_direction(self):
        order = note_order_from_str("Title", OrderDirection.DESCENDING)
        assert order == NoteOrder(field=OrderField.TITLE, direction=OrderDirection.DESCENDING)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("date:asc", NoteOrder(field=OrderField.DATE, direction=OrderDirection.ASCENDING)),
            ("color:DESC", NoteOrder(field=OrderField.COLOR, direction=OrderDirection.DESCENDING)),
            (" title:ascending ", NoteOrder(field=OrderField.TITLE, direction=OrderDirection.ASCENDING)),
        ],
    )
    def test_explicit_direction_wins(self, value, expected):
        assert note_order_from_str(value, OrderDirection.DESCENDING) == expected

    def test_unknown_field_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            note_order_from_str("size")
        assert exc_info.value.code == "VAL_VALIDATION_ERROR"
        assert "title" in exc_info.value.details["allowed_fields"]

    def test_unknown_direction_raises(self):
        with pytest.raises(ValidationError, match="direction"):
            note_order_from_str("title:sideways")


class TestNote:
    def test_new_note_has_no_id(self):
        note = Note(title="Draft")
        assert note.is_new
        assert note.timestamp > 0

    def test_copy_with_id_is_not_new(self):
        note = Note(title="Draft").model_copy(update={"id": "abc"})
        assert not note.is_new
        assert note.title == "Draft"

    def test_equal_fields_mean_equal_notes(self):
        assert Note(id="1", title="t", timestamp=5) == Note(id="1", title="t", timestamp=5)

    def test_note_create_builds_unsaved_note(self):
        note = NoteCreate(title="Groceries", content="Milk", color=0xFFFFAB91).to_note()
        assert note.is_new
        assert (note.title, note.content, note.color) == ("Groceries", "Milk", 0xFFFFAB91)

    def test_note_create_rejects_long_title(self):
        with pytest.raises(pydantic.ValidationError):
            NoteCreate(title="x" * 256)
