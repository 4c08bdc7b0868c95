"""포지션 관리 유스케이스.

draft 포지션의 생성/조회/수정/삭제와
방향별 disposition 뷰 조회를 담당한다.
"""

import logging
from collections.abc import Mapping
from typing import Any

from load_disposition.domain.entities.position import Position
from load_disposition.domain.enums import Direction, PositionState
from load_disposition.domain.events.disposition_events import (
    DraftPositionCreatedEvent,
    DraftPositionDeletedEvent,
    DraftPositionUpdatedEvent,
)
from load_disposition.domain.exceptions import (
    InvalidInputError,
    InvalidStateError,
)
from load_disposition.domain.views import DispositionView, PositionSummary
from load_disposition.usecase.ports.config_port import DispositionConfig
from load_disposition.usecase.ports.event_publisher import EventPublisher
from load_disposition.usecase.ports.load_repository import LoadRepository
from load_disposition.usecase.ports.lock_provider import LockProvider
from load_disposition.usecase.ports.position_repository import (
    PositionRepository,
)
from load_disposition.usecase.position_reader import PositionReader

logger = logging.getLogger(__name__)


def parse_direction(value: str | Direction) -> Direction:
    """문자열을 Direction으로 변환한다.

    Raises:
        InvalidInputError: export/import가 아닐 때.
    """
    try:
        return Direction(value)
    except ValueError:
        raise InvalidInputError(
            f'유효하지 않은 유형입니다: {value!r} (export/import)'
        ) from None


class ManagePositions:
    """포지션 관리 유스케이스.

    Args:
        position_repo: 포지션 저장소.
        load_repo: 화물 저장소.
        event_publisher: 이벤트 발행자.
        lock_provider: 포지션 단위 잠금 제공자.
        config: 포지션 번호 설정.
    """

    def __init__(
        self,
        position_repo: PositionRepository,
        load_repo: LoadRepository,
        event_publisher: EventPublisher,
        lock_provider: LockProvider,
        config: DispositionConfig,
    ) -> None:
        self._position_repo = position_repo
        self._load_repo = load_repo
        self._event_publisher = event_publisher
        self._locks = lock_provider
        self._config = config
        self._reader = PositionReader(position_repo, load_repo)

    def create_draft(
        self,
        position_type: str | Direction,
        name: str = '',
        notes: str = '',
        route: str = '',
    ) -> PositionSummary:
        """빈 draft 포지션을 생성한다.

        Args:
            position_type: 포지션 유형 (export/import).
            name: 포지션 이름.
            notes: 메모.
            route: 경로 설명.

        Returns:
            생성된 포지션 요약.

        Raises:
            InvalidInputError: 유형 또는 속성 값이 잘못되었을 때.
        """
        direction = parse_direction(position_type)
        for key, value in (('name', name), ('notes', notes), ('route', route)):
            if not isinstance(value, str):
                raise InvalidInputError(
                    f'{key} 값은 문자열이어야 합니다: {value!r}'
                )

        position_id = self._position_repo.next_position_id()
        position = Position(
            position_id=position_id,
            position_type=direction,
            position_number=self._config.format_position_number(
                direction, position_id
            ),
            name=name,
            notes=notes,
            route=route,
        )
        self._position_repo.save(position)
        logger.info(
            'Draft position created: %s (%s)',
            position.position_number, direction,
        )

        self._event_publisher.publish(
            DraftPositionCreatedEvent(
                position_id=position_id,
                position_number=position.position_number,
                position_type=direction,
            )
        )
        return self._reader.summarize(position)

    def get_position(self, position_id: int) -> PositionSummary:
        """포지션을 조회한다.

        Raises:
            NotFoundError: 포지션이 없을 때.
        """
        return self._reader.summarize(
            self._reader.get_position(position_id)
        )

    def update_draft(
        self, position_id: int, changes: Mapping[str, Any]
    ) -> PositionSummary:
        """draft 포지션의 속성을 부분 수정한다.

        Args:
            position_id: 포지션 ID.
            changes: 수정할 필드 (name, notes, route).

        Returns:
            수정된 포지션 요약.

        Raises:
            NotFoundError: 포지션이 없을 때.
            InvalidStateError: draft 상태가 아닐 때.
            InvalidInputError: 수정할 수 없는 필드가 포함되었을 때.
        """
        with self._locks.position_lock(position_id):
            position = self._reader.get_position(position_id)
            changed = position.apply_changes(dict(changes))
            if changed:
                self._position_repo.save(position)

        if changed:
            logger.info(
                'Draft position %d updated: %s',
                position_id, ', '.join(changed),
            )
            self._event_publisher.publish(
                DraftPositionUpdatedEvent(
                    position_id=position_id,
                    changed_fields=tuple(changed),
                )
            )
        return self._reader.summarize(position)

    def delete_draft(self, position_id: int) -> None:
        """draft 포지션을 삭제한다.

        소속 화물은 삭제하지 않고 미배정 상태로 되돌린다.

        Raises:
            NotFoundError: 포지션이 없을 때.
            InvalidStateError: confirmed 포지션일 때.
        """
        with self._locks.position_lock(position_id):
            position = self._reader.get_position(position_id)
            if not position.is_draft:
                raise InvalidStateError(
                    f'Position [{position_id}]: 확정된 포지션은 '
                    f'삭제할 수 없습니다.'
                )
            released = position.release_loads()
            self._position_repo.delete(position_id)

        logger.info(
            'Draft position %d deleted, %d load(s) released',
            position_id, len(released),
        )
        self._event_publisher.publish(
            DraftPositionDeletedEvent(
                position_id=position_id,
                released_load_ids=tuple(released),
            )
        )

    def get_disposition_view(
        self, direction: str | Direction
    ) -> DispositionView:
        """방향별 disposition 뷰를 조회한다.

        Args:
            direction: 조회할 방향 (export/import).

        Returns:
            draft/active 포지션과 미배정 화물 목록.

        Raises:
            InvalidInputError: 방향 값이 잘못되었을 때.
        """
        disposition_type = parse_direction(direction)

        drafts = self._position_repo.list_positions(
            disposition_type, PositionState.DRAFT
        )
        actives = self._position_repo.list_positions(
            disposition_type, PositionState.CONFIRMED
        )

        # draft 포지션 소속만 배정으로 본다
        taken: set[int] = set()
        for position in self._position_repo.list_positions(
            state=PositionState.DRAFT
        ):
            taken.update(position.load_ids)

        unassigned = [
            load
            for load in self._load_repo.list_by_direction(disposition_type)
            if load.load_id not in taken
        ]

        return DispositionView(
            disposition_type=disposition_type,
            draft_positions=tuple(self._reader.summarize(p) for p in drafts),
            active_positions=tuple(
                self._reader.summarize(p) for p in actives
            ),
            unassigned_loads=tuple(unassigned),
        )
