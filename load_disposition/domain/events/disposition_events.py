"""Disposition 도메인 이벤트 정의.

유스케이스에서 상태 변경 후 발행하며,
infra 레이어에서 구독하여 알림/외부 전파 등 부가 로직을 처리한다.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from load_disposition.domain.enums import Direction


@dataclass(frozen=True)
class DomainEvent:
    """도메인 이벤트 기본 클래스.

    Args:
        timestamp: 이벤트 발생 시각 (UTC).
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class DraftPositionCreatedEvent(DomainEvent):
    """draft 포지션 생성 이벤트.

    Args:
        position_id: 포지션 ID.
        position_number: 포지션 번호.
        position_type: 포지션 유형.
    """

    position_id: int = 0
    position_number: str = ''
    position_type: Direction = Direction.EXPORT


@dataclass(frozen=True)
class DraftPositionUpdatedEvent(DomainEvent):
    """draft 포지션 속성 수정 이벤트.

    Args:
        position_id: 포지션 ID.
        changed_fields: 변경된 필드명.
    """

    position_id: int = 0
    changed_fields: tuple[str, ...] = ()


@dataclass(frozen=True)
class DraftPositionDeletedEvent(DomainEvent):
    """draft 포지션 삭제 이벤트.

    Args:
        position_id: 삭제된 포지션 ID.
        released_load_ids: 미배정 상태로 돌아간 화물 ID.
    """

    position_id: int = 0
    released_load_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class LoadAssignedEvent(DomainEvent):
    """화물 배정 이벤트.

    Args:
        position_id: 포지션 ID.
        load_id: 배정된 화물 ID.
    """

    position_id: int = 0
    load_id: int = 0


@dataclass(frozen=True)
class LoadUnassignedEvent(DomainEvent):
    """화물 배정 해제 이벤트.

    Args:
        position_id: 포지션 ID.
        load_id: 해제된 화물 ID.
    """

    position_id: int = 0
    load_id: int = 0


@dataclass(frozen=True)
class PositionConfirmedEvent(DomainEvent):
    """포지션 확정 이벤트.

    Args:
        position_id: 포지션 ID.
        position_number: 포지션 번호.
        load_count: 확정 시점 화물 수.
    """

    position_id: int = 0
    position_number: str = ''
    load_count: int = 0


@dataclass(frozen=True)
class BulkConfirmCompletedEvent(DomainEvent):
    """일괄 확정 완료 이벤트.

    Args:
        confirmed_ids: 확정에 성공한 포지션 ID.
        failed_ids: 확정에 실패한 포지션 ID.
    """

    confirmed_ids: tuple[int, ...] = ()
    failed_ids: tuple[int, ...] = ()
