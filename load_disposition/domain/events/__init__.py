"""Disposition 도메인 이벤트."""

from load_disposition.domain.events.disposition_events import (
    BulkConfirmCompletedEvent,
    DomainEvent,
    DraftPositionCreatedEvent,
    DraftPositionDeletedEvent,
    DraftPositionUpdatedEvent,
    LoadAssignedEvent,
    LoadUnassignedEvent,
    PositionConfirmedEvent,
)

__all__ = [
    'BulkConfirmCompletedEvent',
    'DomainEvent',
    'DraftPositionCreatedEvent',
    'DraftPositionDeletedEvent',
    'DraftPositionUpdatedEvent',
    'LoadAssignedEvent',
    'LoadUnassignedEvent',
    'PositionConfirmedEvent',
]
