"""포지션 일괄 확정 유스케이스.

여러 포지션을 입력 순서대로 하나씩 독립적으로 확정한다.
한 포지션의 실패는 수집만 하고 나머지 처리를 막지 않으며,
이미 확정된 포지션은 되돌리지 않는다.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from load_disposition.domain.events.disposition_events import (
    BulkConfirmCompletedEvent,
)
from load_disposition.domain.exceptions import DomainError, InvalidInputError
from load_disposition.domain.views import PositionSummary
from load_disposition.usecase.confirm_position import ConfirmPosition
from load_disposition.usecase.ports.event_publisher import EventPublisher

logger = logging.getLogger(__name__)


def _check_id(position_id: Any) -> int:
    if isinstance(position_id, bool) or not isinstance(position_id, int):
        raise InvalidInputError(
            f'position_id는 정수여야 합니다: {position_id!r}'
        )
    return position_id


@dataclass(frozen=True)
class ConfirmationSucceeded:
    """포지션 하나의 확정 성공 결과.

    Args:
        position_id: 포지션 ID.
        summary: 확정된 포지션 요약.
    """

    position_id: int
    summary: PositionSummary


@dataclass(frozen=True)
class ConfirmationFailed:
    """포지션 하나의 확정 실패 결과.

    Args:
        position_id: 요청에 들어온 포지션 ID (검증 전 값 그대로).
        reason: 오류 분류 (e.g. 'EmptyPosition').
        message: 사람이 읽을 수 있는 오류 설명.
    """

    position_id: Any
    reason: str
    message: str = ''


ConfirmationOutcome = ConfirmationSucceeded | ConfirmationFailed


@dataclass(frozen=True)
class BulkConfirmResult:
    """일괄 확정 결과 (입력 순서 유지).

    Args:
        outcomes: 포지션별 성공/실패 결과.
    """

    outcomes: tuple[ConfirmationOutcome, ...] = ()

    @property
    def confirmed(self) -> list[PositionSummary]:
        """확정에 성공한 포지션 (입력 순서)."""
        return [
            o.summary for o in self.outcomes
            if isinstance(o, ConfirmationSucceeded)
        ]

    @property
    def errors(self) -> list[ConfirmationFailed]:
        """확정에 실패한 포지션별 오류 (입력 순서)."""
        return [o for o in self.outcomes if isinstance(o, ConfirmationFailed)]


class BulkConfirmPositions:
    """일괄 확정 유스케이스.

    Args:
        confirm_position: 단건 확정 유스케이스.
        event_publisher: 이벤트 발행자.
    """

    def __init__(
        self,
        confirm_position: ConfirmPosition,
        event_publisher: EventPublisher,
    ) -> None:
        self._confirm_position = confirm_position
        self._event_publisher = event_publisher

    def confirm_all(self, position_ids: Sequence[Any]) -> BulkConfirmResult:
        """포지션 목록을 하나씩 확정한다.

        같은 배치에 중복된 ID는 두 번째 시도에서 InvalidState로 실패한다.
        정수가 아닌 ID는 해당 항목만 InvalidInput으로 실패한다.

        Args:
            position_ids: 확정할 포지션 ID 목록.

        Returns:
            포지션별 결과.
        """
        outcomes: list[ConfirmationOutcome] = []
        for position_id in position_ids:
            try:
                summary = self._confirm_position.confirm(
                    _check_id(position_id)
                )
            except DomainError as e:
                logger.warning(
                    'Bulk confirm: position %s failed (%s): %s',
                    position_id, e.code, e,
                )
                outcomes.append(
                    ConfirmationFailed(
                        position_id=position_id,
                        reason=e.code,
                        message=str(e),
                    )
                )
                continue
            outcomes.append(
                ConfirmationSucceeded(position_id=position_id, summary=summary)
            )

        result = BulkConfirmResult(outcomes=tuple(outcomes))
        logger.info(
            'Bulk confirm finished: %d confirmed, %d failed',
            len(result.confirmed), len(result.errors),
        )
        self._event_publisher.publish(
            BulkConfirmCompletedEvent(
                confirmed_ids=tuple(s.position_id for s in result.confirmed),
                failed_ids=tuple(e.position_id for e in result.errors),
            )
        )
        return result
