"""포지션(Position) 엔티티."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from load_disposition.domain.enums import Direction, PositionState
from load_disposition.domain.exceptions import (
    EmptyPositionError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
)
from load_disposition.domain.value_objects.capacity import Capacity

# draft → confirmed 단방향, confirmed는 종료 상태
_VALID_TRANSITIONS: dict[PositionState, set[PositionState]] = {
    PositionState.DRAFT: {PositionState.CONFIRMED},
    PositionState.CONFIRMED: set(),
}

UPDATABLE_FIELDS = frozenset({'name', 'notes', 'route'})


@dataclass
class Position:
    """화물을 묶어 선적하는 단위 (수출/수입 컨테이너, 혼재 화물).

    용량 값은 저장하지 않고 소속 화물에서 매번 계산한다.
    단, 확정 시점의 용량은 ``capacity_snapshot`` 으로 고정한다.

    Args:
        position_id: 포지션 고유 ID.
        position_type: 포지션 유형. 모든 소속 화물의 방향과 같아야 한다.
        position_number: 포지션 번호 (e.g. 'EXP-000001').
        state: 라이프사이클 상태.
        name: 포지션 이름.
        notes: 메모.
        route: 경로 설명. 해석하지 않는다.
        load_ids: 소속 화물 ID (배정 순서 유지, 중복 없음).
        capacity_snapshot: 확정 시점 용량.
        created_at: 생성 시각 (UTC).
        confirmed_at: 확정 시각 (UTC).
    """

    position_id: int
    position_type: Direction
    position_number: str = ''
    state: PositionState = PositionState.DRAFT
    name: str = ''
    notes: str = ''
    route: str = ''
    load_ids: list[int] = field(default_factory=list)
    capacity_snapshot: Capacity | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    confirmed_at: datetime | None = None

    @property
    def is_draft(self) -> bool:
        return self.state == PositionState.DRAFT

    @property
    def is_empty(self) -> bool:
        return not self.load_ids

    def has_load(self, load_id: int) -> bool:
        return load_id in self.load_ids

    def ensure_draft(self, operation: str) -> None:
        """draft 상태가 아니면 예외를 발생시킨다.

        Args:
            operation: 오류 메시지에 표시할 작업 이름.

        Raises:
            InvalidStateError: draft 상태가 아닐 때.
        """
        if not self.is_draft:
            raise InvalidStateError(
                f'Position [{self.position_id}]: {self.state} 상태에서는 '
                f'{operation} 불가'
            )

    def add_load(self, load_id: int) -> bool:
        """화물을 소속 목록 끝에 추가한다.

        Returns:
            새로 추가되었으면 True, 이미 소속이면 False.
        """
        self.ensure_draft('화물 배정')
        if load_id in self.load_ids:
            return False
        self.load_ids.append(load_id)
        return True

    def remove_load(self, load_id: int) -> None:
        """화물을 소속 목록에서 제거한다.

        Raises:
            InvalidStateError: draft 상태가 아닐 때.
            NotFoundError: 소속 화물이 아닐 때.
        """
        self.ensure_draft('화물 배정 해제')
        if load_id not in self.load_ids:
            raise NotFoundError(
                f'Load [{load_id}]는 Position [{self.position_id}]에 '
                f'배정되어 있지 않습니다.'
            )
        self.load_ids.remove(load_id)

    def release_loads(self) -> list[int]:
        """모든 화물 배정을 해제하고 해제된 ID 목록을 반환한다."""
        self.ensure_draft('화물 배정 해제')
        released = list(self.load_ids)
        self.load_ids.clear()
        return released

    def apply_changes(self, changes: dict[str, Any]) -> list[str]:
        """수정 가능한 속성을 부분 갱신한다.

        모든 값을 먼저 검증한 후에 반영한다.

        Args:
            changes: 필드명 → 새 값.

        Returns:
            실제로 변경된 필드명 목록.

        Raises:
            InvalidStateError: draft 상태가 아닐 때.
            InvalidInputError: 수정 불가 필드이거나 값이 문자열이 아닐 때.
        """
        self.ensure_draft('수정')

        unknown = sorted(set(changes) - UPDATABLE_FIELDS)
        if unknown:
            raise InvalidInputError(
                f'수정할 수 없는 필드입니다: {", ".join(unknown)}'
            )
        for key, value in changes.items():
            if not isinstance(value, str):
                raise InvalidInputError(
                    f'{key} 값은 문자열이어야 합니다: {value!r}'
                )

        changed = []
        for key, value in changes.items():
            if getattr(self, key) != value:
                setattr(self, key, value)
                changed.append(key)
        return changed

    def confirm(
        self, capacity: Capacity, confirmed_at: datetime | None = None
    ) -> None:
        """포지션을 confirmed 상태로 전이한다.

        Args:
            capacity: 확정 시점에 계산된 용량. 스냅샷으로 저장된다.
            confirmed_at: 확정 시각. None이면 현재 시각.

        Raises:
            InvalidStateError: draft 상태가 아닐 때 (재확정 포함).
            EmptyPositionError: 소속 화물이 없을 때.
        """
        allowed = _VALID_TRANSITIONS.get(self.state, set())
        if PositionState.CONFIRMED not in allowed:
            raise InvalidStateError(
                f'Position [{self.position_id}]: '
                f'{self.state} -> {PositionState.CONFIRMED} 전이 불가'
            )
        if self.is_empty:
            raise EmptyPositionError(
                f'Position [{self.position_id}]에 배정된 화물이 없습니다.'
            )

        self.state = PositionState.CONFIRMED
        self.capacity_snapshot = capacity
        self.confirmed_at = confirmed_at or datetime.now(UTC)
