"""포지션 조회 헬퍼.

포지션 조회, 소속 화물 해석, 용량 계산을 유스케이스 간에 공유한다.
"""

import logging

from load_disposition.domain.entities.load import Load
from load_disposition.domain.entities.position import Position
from load_disposition.domain.exceptions import NotFoundError
from load_disposition.domain.value_objects.capacity import calculate_capacity
from load_disposition.domain.views import PositionSummary
from load_disposition.usecase.ports.load_repository import LoadRepository
from load_disposition.usecase.ports.position_repository import (
    PositionRepository,
)

logger = logging.getLogger(__name__)


class PositionReader:
    """포지션/화물 조회 헬퍼.

    Args:
        position_repo: 포지션 저장소.
        load_repo: 화물 저장소.
    """

    def __init__(
        self,
        position_repo: PositionRepository,
        load_repo: LoadRepository,
    ) -> None:
        self._position_repo = position_repo
        self._load_repo = load_repo

    def get_position(self, position_id: int) -> Position:
        """포지션을 조회한다.

        Raises:
            NotFoundError: 포지션이 없을 때.
        """
        position = self._position_repo.get(position_id)
        if position is None:
            raise NotFoundError(
                f'Position [{position_id}]가 존재하지 않습니다.'
            )
        return position

    def get_load(self, load_id: int) -> Load:
        """화물을 조회한다.

        Raises:
            NotFoundError: 화물이 없을 때.
        """
        load = self._load_repo.get(load_id)
        if load is None:
            raise NotFoundError(f'Load [{load_id}]가 존재하지 않습니다.')
        return load

    def resolve_loads(self, position: Position) -> list[Load]:
        """소속 화물 ID를 화물 객체로 해석한다.

        다른 서브시스템에서 삭제된 화물은 건너뛴다.
        """
        loads = []
        for load_id in position.load_ids:
            load = self._load_repo.get(load_id)
            if load is None:
                logger.warning(
                    'Position %d references missing load %d',
                    position.position_id, load_id,
                )
                continue
            loads.append(load)
        return loads

    def summarize(self, position: Position) -> PositionSummary:
        """포지션을 화물/용량이 해석된 요약으로 변환한다.

        confirmed 포지션은 확정 시점 스냅샷 용량을 사용한다.
        """
        loads = self.resolve_loads(position)
        if position.capacity_snapshot is not None:
            capacity = position.capacity_snapshot
        else:
            capacity = calculate_capacity(loads)
        return PositionSummary(
            position=position,
            loads=tuple(loads),
            capacity=capacity,
        )
