"""Disposition 조회용 프로젝션.

저장되는 엔티티가 아니라 조회 시점에 구성되는 읽기 전용 뷰이다.
"""

from dataclasses import dataclass

from load_disposition.domain.entities.load import Load
from load_disposition.domain.entities.position import Position
from load_disposition.domain.enums import Direction
from load_disposition.domain.value_objects.capacity import Capacity


@dataclass(frozen=True)
class PositionSummary:
    """소속 화물과 용량이 함께 해석된 포지션.

    Args:
        position: 포지션 스냅샷.
        loads: 소속 화물 (배정 순서).
        capacity: draft는 현재 계산값, confirmed는 확정 스냅샷.
    """

    position: Position
    loads: tuple[Load, ...] = ()
    capacity: Capacity = Capacity()

    @property
    def position_id(self) -> int:
        return self.position.position_id


@dataclass(frozen=True)
class DispositionView:
    """방향별 disposition 화면 데이터.

    Args:
        disposition_type: 조회한 방향.
        draft_positions: draft 포지션 목록.
        active_positions: confirmed 포지션 목록.
        unassigned_loads: 어떤 포지션에도 배정되지 않은 화물 목록.
    """

    disposition_type: Direction
    draft_positions: tuple[PositionSummary, ...] = ()
    active_positions: tuple[PositionSummary, ...] = ()
    unassigned_loads: tuple[Load, ...] = ()
