"""도메인 이벤트 단위 테스트."""

from datetime import datetime

from load_disposition.domain.enums import Direction
from load_disposition.domain.events.disposition_events import (
    BulkConfirmCompletedEvent,
    DomainEvent,
    DraftPositionCreatedEvent,
    DraftPositionDeletedEvent,
    LoadAssignedEvent,
)


class TestDomainEvent:
    def test_timestamp_auto_set(self):
        event = DomainEvent()
        assert isinstance(event.timestamp, datetime)
        assert event.timestamp.tzinfo is not None

    def test_frozen(self):
        event = DomainEvent()
        try:
            event.timestamp = datetime.now()
            assert False, "Should raise FrozenInstanceError"
        except AttributeError:
            pass


class TestDispositionEvents:
    def test_created_event_fields(self):
        event = DraftPositionCreatedEvent(
            position_id=1,
            position_number="EXP-0001",
            position_type=Direction.EXPORT,
        )
        assert event.position_type == Direction.EXPORT
        assert isinstance(event, DomainEvent)

    def test_deleted_event_keeps_released_ids(self):
        event = DraftPositionDeletedEvent(
            position_id=3, released_load_ids=(1, 2)
        )
        assert event.released_load_ids == (1, 2)

    def test_value_equality(self):
        ts = datetime(2024, 1, 1)
        a = LoadAssignedEvent(timestamp=ts, position_id=1, load_id=2)
        b = LoadAssignedEvent(timestamp=ts, position_id=1, load_id=2)
        assert a == b

    def test_bulk_event_defaults(self):
        event = BulkConfirmCompletedEvent()
        assert event.confirmed_ids == ()
        assert event.failed_ids == ()
