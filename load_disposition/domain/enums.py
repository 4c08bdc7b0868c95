"""Disposition 도메인 열거형 정의."""

from enum import StrEnum


class Direction(StrEnum):
    """화물 방향 / 포지션 유형."""

    EXPORT = 'export'
    IMPORT = 'import'


class PositionState(StrEnum):
    """포지션 라이프사이클 상태.

    CONFIRMED는 호출 측에서 'active'로 부르는 상태이다.
    """

    DRAFT = 'draft'
    CONFIRMED = 'confirmed'


class LoadStatus(StrEnum):
    """화물 상태.

    화물 편집 서브시스템이 관리하며, disposition에서는 해석하지 않는다.
    """

    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    ASSIGNED = 'assigned'
    LOADING = 'loading'
    LOADED = 'loaded'
    IN_TRANSIT = 'in_transit'
    AT_CUSTOMS = 'at_customs'
    DELIVERED = 'delivered'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'
    IN_PROGRESS = 'in_progress'
