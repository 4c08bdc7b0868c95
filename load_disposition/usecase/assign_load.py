"""화물 배정 유스케이스.

draft 포지션에 화물을 배정/해제하며
배정 배타성과 방향 일치 불변식을 강제한다.
"""

import logging

from load_disposition.domain.events.disposition_events import (
    LoadAssignedEvent,
    LoadUnassignedEvent,
)
from load_disposition.domain.exceptions import (
    AlreadyAssignedError,
    DirectionMismatchError,
)
from load_disposition.domain.views import PositionSummary
from load_disposition.usecase.ports.event_publisher import EventPublisher
from load_disposition.usecase.ports.load_repository import LoadRepository
from load_disposition.usecase.ports.lock_provider import LockProvider
from load_disposition.usecase.ports.position_repository import (
    PositionRepository,
)
from load_disposition.usecase.position_reader import PositionReader

logger = logging.getLogger(__name__)


class LoadAssignmentManager:
    """화물 배정 유스케이스.

    화물 잠금 → 포지션 잠금 순서로 배타 범위를 잡은 뒤
    조회-검증-저장을 수행한다.

    Args:
        position_repo: 포지션 저장소.
        load_repo: 화물 저장소.
        event_publisher: 이벤트 발행자.
        lock_provider: 잠금 제공자.
    """

    def __init__(
        self,
        position_repo: PositionRepository,
        load_repo: LoadRepository,
        event_publisher: EventPublisher,
        lock_provider: LockProvider,
    ) -> None:
        self._position_repo = position_repo
        self._event_publisher = event_publisher
        self._locks = lock_provider
        self._reader = PositionReader(position_repo, load_repo)

    def assign(self, position_id: int, load_id: int) -> PositionSummary:
        """draft 포지션에 화물을 배정한다.

        이미 같은 포지션에 소속된 화물이면 변경 없이 성공한다.

        Args:
            position_id: 대상 포지션 ID.
            load_id: 배정할 화물 ID.

        Returns:
            용량이 재계산된 포지션 요약.

        Raises:
            NotFoundError: 포지션 또는 화물이 없을 때.
            InvalidStateError: 포지션이 draft 상태가 아닐 때.
            DirectionMismatchError: 화물 방향과 포지션 유형이 다를 때.
            AlreadyAssignedError: 다른 draft 포지션에 소속된 화물일 때.
        """
        with self._locks.load_lock(load_id), \
                self._locks.position_lock(position_id):
            position = self._reader.get_position(position_id)
            load = self._reader.get_load(load_id)
            position.ensure_draft('화물 배정')

            if position.has_load(load_id):
                logger.debug(
                    'Load %d already in position %d', load_id, position_id
                )
                return self._reader.summarize(position)

            if load.direction != position.position_type:
                raise DirectionMismatchError(
                    f'Load [{load_id}] 방향({load.direction})이 '
                    f'Position [{position_id}] 유형'
                    f'({position.position_type})과 다릅니다.'
                )

            owner = self._position_repo.find_draft_by_load(load_id)
            if owner is not None and owner.position_id != position_id:
                raise AlreadyAssignedError(
                    f'Load [{load_id}]는 이미 Position '
                    f'[{owner.position_id}]에 배정되어 있습니다.'
                )

            position.add_load(load_id)
            # 요약 계산이 실패하면 저장하지 않는다
            summary = self._reader.summarize(position)
            self._position_repo.save(position)

        logger.info('Load %d assigned to position %d', load_id, position_id)
        self._event_publisher.publish(
            LoadAssignedEvent(position_id=position_id, load_id=load_id)
        )
        return summary

    def unassign(self, position_id: int, load_id: int) -> None:
        """draft 포지션에서 화물 배정을 해제한다.

        화물 자체는 삭제하지 않는다.

        Args:
            position_id: 대상 포지션 ID.
            load_id: 해제할 화물 ID.

        Raises:
            NotFoundError: 포지션이 없거나 화물이 소속되어 있지 않을 때.
            InvalidStateError: 포지션이 draft 상태가 아닐 때.
        """
        with self._locks.load_lock(load_id), \
                self._locks.position_lock(position_id):
            position = self._reader.get_position(position_id)
            position.remove_load(load_id)
            self._position_repo.save(position)

        logger.info(
            'Load %d unassigned from position %d', load_id, position_id
        )
        self._event_publisher.publish(
            LoadUnassignedEvent(position_id=position_id, load_id=load_id)
        )
