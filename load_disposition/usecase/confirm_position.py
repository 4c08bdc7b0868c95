"""포지션 확정 유스케이스.

draft 포지션을 confirmed 상태로 전이하고
확정 시점 용량 스냅샷을 저장한다.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from load_disposition.domain.events.disposition_events import (
    PositionConfirmedEvent,
)
from load_disposition.domain.value_objects.capacity import calculate_capacity
from load_disposition.domain.views import PositionSummary
from load_disposition.usecase.ports.event_publisher import EventPublisher
from load_disposition.usecase.ports.load_repository import LoadRepository
from load_disposition.usecase.ports.lock_provider import LockProvider
from load_disposition.usecase.ports.position_repository import (
    PositionRepository,
)
from load_disposition.usecase.position_reader import PositionReader

logger = logging.getLogger(__name__)


class ConfirmPosition:
    """포지션 확정 유스케이스.

    Args:
        position_repo: 포지션 저장소.
        load_repo: 화물 저장소.
        event_publisher: 이벤트 발행자.
        lock_provider: 잠금 제공자.
        clock: 현재 시각 함수. 테스트에서 교체한다.
    """

    def __init__(
        self,
        position_repo: PositionRepository,
        load_repo: LoadRepository,
        event_publisher: EventPublisher,
        lock_provider: LockProvider,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._position_repo = position_repo
        self._event_publisher = event_publisher
        self._locks = lock_provider
        self._clock = clock or (lambda: datetime.now(UTC))
        self._reader = PositionReader(position_repo, load_repo)

    def confirm(self, position_id: int) -> PositionSummary:
        """draft 포지션을 확정한다.

        Args:
            position_id: 확정할 포지션 ID.

        Returns:
            확정된 포지션 요약 (스냅샷 용량 포함).

        Raises:
            NotFoundError: 포지션이 없을 때.
            InvalidStateError: draft 상태가 아닐 때 (재확정 포함).
            EmptyPositionError: 배정된 화물이 없을 때.
        """
        with self._locks.position_lock(position_id):
            position = self._reader.get_position(position_id)
            loads = self._reader.resolve_loads(position)
            position.confirm(calculate_capacity(loads), self._clock())
            self._position_repo.save(position)

        logger.info(
            'Position %s confirmed with %d load(s)',
            position.position_number, len(position.load_ids),
        )
        self._event_publisher.publish(
            PositionConfirmedEvent(
                position_id=position_id,
                position_number=position.position_number,
                load_count=len(position.load_ids),
            )
        )
        return self._reader.summarize(position)
