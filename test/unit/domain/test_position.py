"""Position 엔티티 단위 테스트."""

from datetime import UTC, datetime

import pytest

from load_disposition.domain.entities.load import Load, LoadItem
from load_disposition.domain.entities.position import Position
from load_disposition.domain.enums import Direction, PositionState
from load_disposition.domain.exceptions import (
    EmptyPositionError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
)
from load_disposition.domain.value_objects.capacity import Capacity


@pytest.fixture
def draft():
    return Position(
        position_id=1,
        position_type=Direction.EXPORT,
        position_number="EXP-0001",
    )


@pytest.fixture
def confirmed(draft):
    draft.add_load(101)
    draft.confirm(Capacity(load_count=1))
    return draft


class TestDefaults:
    def test_new_position_is_empty_draft(self, draft):
        assert draft.state == PositionState.DRAFT
        assert draft.is_draft
        assert draft.is_empty
        assert draft.capacity_snapshot is None
        assert draft.confirmed_at is None


class TestMembership:
    def test_add_load_appends_in_order(self, draft):
        assert draft.add_load(5) is True
        assert draft.add_load(3) is True
        assert draft.load_ids == [5, 3]

    def test_add_existing_load_does_not_duplicate(self, draft):
        draft.add_load(5)
        assert draft.add_load(5) is False
        assert draft.load_ids == [5]

    def test_remove_load(self, draft):
        draft.add_load(5)
        draft.remove_load(5)
        assert draft.is_empty

    def test_remove_missing_load_raises(self, draft):
        with pytest.raises(NotFoundError):
            draft.remove_load(99)

    def test_release_loads_returns_ids(self, draft):
        draft.add_load(1)
        draft.add_load(2)
        assert draft.release_loads() == [1, 2]
        assert draft.is_empty

    def test_confirmed_rejects_membership_changes(self, confirmed):
        with pytest.raises(InvalidStateError):
            confirmed.add_load(7)
        with pytest.raises(InvalidStateError):
            confirmed.remove_load(101)
        assert confirmed.load_ids == [101]


class TestApplyChanges:
    def test_updates_allowed_fields(self, draft):
        changed = draft.apply_changes({"name": "Munich", "route": "TR-DE"})

        assert sorted(changed) == ["name", "route"]
        assert draft.name == "Munich"
        assert draft.route == "TR-DE"

    def test_unchanged_values_not_reported(self, draft):
        draft.apply_changes({"notes": "x"})
        assert draft.apply_changes({"notes": "x"}) == []

    def test_rejects_unknown_field_without_partial_update(self, draft):
        with pytest.raises(InvalidInputError, match="state"):
            draft.apply_changes({"name": "new", "state": "confirmed"})
        assert draft.name == ""
        assert draft.state == PositionState.DRAFT

    def test_rejects_non_string_value(self, draft):
        with pytest.raises(InvalidInputError):
            draft.apply_changes({"name": 42})

    def test_confirmed_rejects_changes(self, confirmed):
        with pytest.raises(InvalidStateError):
            confirmed.apply_changes({"name": "late"})


class TestConfirm:
    def test_confirm_sets_state_and_snapshot(self, draft):
        draft.add_load(101)
        at = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        capacity = Capacity(total_weight=10.0, load_count=1)

        draft.confirm(capacity, at)

        assert draft.state == PositionState.CONFIRMED
        assert draft.capacity_snapshot == capacity
        assert draft.confirmed_at == at

    def test_empty_draft_raises(self, draft):
        with pytest.raises(EmptyPositionError):
            draft.confirm(Capacity())
        assert draft.state == PositionState.DRAFT

    def test_reconfirm_raises_invalid_state(self, confirmed):
        with pytest.raises(InvalidStateError, match="전이 불가"):
            confirmed.confirm(Capacity(load_count=1))

    def test_ensure_draft_message_names_operation(self, confirmed):
        with pytest.raises(InvalidStateError, match="삭제"):
            confirmed.ensure_draft("삭제")


class TestLoad:
    def test_hazardous_flag(self):
        load = Load(
            load_id=1,
            direction=Direction.IMPORT,
            items=(LoadItem(), LoadItem(is_hazardous=True)),
        )
        assert load.has_hazardous_items

    def test_items_default_empty(self):
        load = Load(load_id=1, direction=Direction.EXPORT)
        assert load.items == ()
        assert not load.has_hazardous_items
