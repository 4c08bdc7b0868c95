"""인메모리 포지션 저장소 구현체."""

import copy
import itertools
import threading

from load_disposition.domain.entities.position import Position
from load_disposition.domain.enums import Direction, PositionState
from load_disposition.usecase.ports.position_repository import (
    PositionRepository,
)


class InMemoryPositionRepository(PositionRepository):
    """PositionRepository의 인메모리 구현체.

    dict 기반으로 포지션을 메모리에 저장한다.
    저장/조회 시 깊은 복사를 사용하여 호출 측과 객체를 공유하지 않으며,
    모든 접근은 Lock으로 스레드 안전성을 보장한다.

    Args:
        start_id: 첫 포지션 ID.
    """

    def __init__(self, start_id: int = 1) -> None:
        self._lock = threading.Lock()
        self._positions: dict[int, Position] = {}
        self._ids = itertools.count(start_id)

    def next_position_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def save(self, position: Position) -> None:
        with self._lock:
            self._positions[position.position_id] = copy.deepcopy(position)

    def get(self, position_id: int) -> Position | None:
        with self._lock:
            position = self._positions.get(position_id)
            return copy.deepcopy(position) if position is not None else None

    def delete(self, position_id: int) -> None:
        with self._lock:
            self._positions.pop(position_id, None)

    def list_positions(
        self,
        position_type: Direction | None = None,
        state: PositionState | None = None,
    ) -> list[Position]:
        with self._lock:
            return [
                copy.deepcopy(p)
                for _, p in sorted(self._positions.items())
                if (position_type is None or p.position_type == position_type)
                and (state is None or p.state == state)
            ]

    def find_draft_by_load(self, load_id: int) -> Position | None:
        with self._lock:
            for _, position in sorted(self._positions.items()):
                if position.is_draft and position.has_load(load_id):
                    return copy.deepcopy(position)
        return None
