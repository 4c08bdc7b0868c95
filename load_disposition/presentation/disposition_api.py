"""Disposition 작업 파사드.

전송 계층과 무관한 작업 집합을 제공한다.
응답은 JSON 직렬화 가능한 dict이며 기존 백엔드 응답 형식
``{"success": ..., "message": ..., "data": ...}`` 을 따른다.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import functools
import inspect
import logging
from typing import Any

from load_disposition.domain.exceptions import DomainError, InvalidInputError
from load_disposition.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from load_disposition.infra.locking.keyed_lock_provider import (
    KeyedLockProvider,
)
from load_disposition.infra.repository.in_memory_load_repository import (
    InMemoryLoadRepository,
)
from load_disposition.infra.repository.in_memory_position_repository import (
    InMemoryPositionRepository,
)
from load_disposition.infra.serialization.payload_serializer import (
    serialize_bulk_result,
    serialize_disposition_view,
    serialize_position_summary,
)
from load_disposition.usecase.assign_load import LoadAssignmentManager
from load_disposition.usecase.bulk_confirm import BulkConfirmPositions
from load_disposition.usecase.confirm_position import ConfirmPosition
from load_disposition.usecase.manage_positions import ManagePositions
from load_disposition.usecase.ports.config_port import DispositionConfig
from load_disposition.usecase.ports.event_publisher import EventPublisher
from load_disposition.usecase.ports.load_repository import LoadRepository
from load_disposition.usecase.ports.lock_provider import LockProvider
from load_disposition.usecase.ports.position_repository import (
    PositionRepository,
)

logger = logging.getLogger(__name__)

Payload = dict[str, Any]


def _error_payload(error: DomainError) -> Payload:
    return {'success': False, 'error': error.code, 'message': str(error)}


def _handle_errors(func: Callable[..., Payload]) -> Callable[..., Payload]:
    """DomainError를 오류 응답으로 변환하는 데코레이터."""
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Payload:
        try:
            return func(*args, **kwargs)
        except DomainError as e:
            logger.info('%s rejected: %s: %s', func.__name__, e.code, e)
            return _error_payload(e)
    return wrapper


def _as_id(value: Any, name: str) -> int:
    """식별자 값을 int로 검증한다."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f'{name}는 정수여야 합니다: {value!r}')
    return value


class DispositionApi:
    """Disposition 작업 파사드.

    Args:
        manage_positions: 포지션 관리 유스케이스.
        assignment: 화물 배정 유스케이스.
        confirm_position: 단건 확정 유스케이스.
        bulk_confirm: 일괄 확정 유스케이스.
    """

    def __init__(
        self,
        manage_positions: ManagePositions,
        assignment: LoadAssignmentManager,
        confirm_position: ConfirmPosition,
        bulk_confirm: BulkConfirmPositions,
    ) -> None:
        self._manage = manage_positions
        self._assignment = assignment
        self._confirm = confirm_position
        self._bulk = bulk_confirm

    @classmethod
    def create(
        cls,
        config: DispositionConfig | None = None,
        load_repo: LoadRepository | None = None,
        position_repo: PositionRepository | None = None,
        event_publisher: EventPublisher | None = None,
        lock_provider: LockProvider | None = None,
    ) -> DispositionApi:
        """유스케이스를 조립하여 파사드를 생성한다.

        주어지지 않은 포트는 인메모리 구현체를 사용한다.
        """
        config = config or DispositionConfig()
        load_repo = load_repo or InMemoryLoadRepository()
        position_repo = position_repo or InMemoryPositionRepository()
        event_publisher = event_publisher or InMemoryEventPublisher()
        lock_provider = lock_provider or KeyedLockProvider()

        confirm_position = ConfirmPosition(
            position_repo, load_repo, event_publisher, lock_provider
        )
        return cls(
            manage_positions=ManagePositions(
                position_repo, load_repo, event_publisher,
                lock_provider, config,
            ),
            assignment=LoadAssignmentManager(
                position_repo, load_repo, event_publisher, lock_provider
            ),
            confirm_position=confirm_position,
            bulk_confirm=BulkConfirmPositions(
                confirm_position, event_publisher
            ),
        )

    @_handle_errors
    def get_disposition_view(
        self, disposition_type: str = 'export'
    ) -> Payload:
        """방향별 draft/active 포지션과 미배정 화물을 조회한다."""
        view = self._manage.get_disposition_view(disposition_type)
        return {'success': True, 'data': serialize_disposition_view(view)}

    @_handle_errors
    def create_draft_position(
        self,
        position_type: str,
        name: str = '',
        notes: str = '',
        route: str = '',
    ) -> Payload:
        """빈 draft 포지션을 생성한다."""
        summary = self._manage.create_draft(
            position_type, name=name, notes=notes, route=route
        )
        return self._position_payload(summary, 'Draft position created')

    @_handle_errors
    def update_draft_position(
        self, position_id: int, data: Mapping[str, Any] | None = None
    ) -> Payload:
        """draft 포지션 속성을 부분 수정한다."""
        if data is not None and not isinstance(data, Mapping):
            raise InvalidInputError(
                f'수정 데이터가 mapping이 아닙니다: {data!r}'
            )
        summary = self._manage.update_draft(
            _as_id(position_id, 'position_id'), data or {}
        )
        return self._position_payload(summary, 'Draft position updated')

    @_handle_errors
    def confirm_position(self, position_id: int) -> Payload:
        """draft 포지션을 확정한다."""
        summary = self._confirm.confirm(_as_id(position_id, 'position_id'))
        return self._position_payload(summary, 'Position confirmed')

    @_handle_errors
    def delete_draft_position(self, position_id: int) -> Payload:
        """draft 포지션을 삭제하고 소속 화물을 해제한다."""
        self._manage.delete_draft(_as_id(position_id, 'position_id'))
        return {'success': True, 'message': 'Draft position deleted'}

    @_handle_errors
    def assign_load(self, position_id: int, load_id: int) -> Payload:
        """draft 포지션에 화물을 배정한다."""
        summary = self._assignment.assign(
            _as_id(position_id, 'position_id'), _as_id(load_id, 'load_id')
        )
        return self._position_payload(summary, 'Load assigned')

    @_handle_errors
    def unassign_load(self, position_id: int, load_id: int) -> Payload:
        """draft 포지션에서 화물 배정을 해제한다."""
        self._assignment.unassign(
            _as_id(position_id, 'position_id'), _as_id(load_id, 'load_id')
        )
        return {'success': True, 'message': 'Load removed from position'}

    @_handle_errors
    def bulk_confirm(self, position_ids: Sequence[int]) -> Payload:
        """여러 포지션을 독립적으로 확정한다.

        개별 실패는 data.errors로 반환되며 응답 자체는 항상 성공이다.
        """
        if isinstance(position_ids, (str, bytes)) or not isinstance(
            position_ids, Sequence
        ):
            raise InvalidInputError(
                f'position_ids는 목록이어야 합니다: {position_ids!r}'
            )
        result = self._bulk.confirm_all(list(position_ids))
        return {
            'success': True,
            'message': (
                f'{len(result.confirmed)} position(s) confirmed, '
                f'{len(result.errors)} failed'
            ),
            'data': serialize_bulk_result(result),
        }

    def dispatch(
        self, operation: str, params: Mapping[str, Any] | None = None
    ) -> Payload:
        """작업 이름과 인자로 작업을 호출한다.

        Args:
            operation: 작업 이름 (e.g. 'assign_load').
            params: 키워드 인자.

        Returns:
            작업 응답 또는 오류 응답.
        """
        handler = _OPERATIONS.get(operation)
        if handler is None:
            return _error_payload(
                InvalidInputError(f'알 수 없는 작업입니다: {operation}')
            )
        kwargs = dict(params or {})
        try:
            inspect.signature(handler).bind(self, **kwargs)
        except TypeError as e:
            return _error_payload(
                InvalidInputError(f'{operation} 인자 오류: {e}')
            )
        return handler(self, **kwargs)

    @staticmethod
    def _position_payload(summary: Any, message: str) -> Payload:
        return {
            'success': True,
            'message': message,
            'data': {'position': serialize_position_summary(summary)},
        }


_OPERATIONS: dict[str, Callable[..., Payload]] = {
    'get_disposition_view': DispositionApi.get_disposition_view,
    'create_draft_position': DispositionApi.create_draft_position,
    'update_draft_position': DispositionApi.update_draft_position,
    'confirm_position': DispositionApi.confirm_position,
    'delete_draft_position': DispositionApi.delete_draft_position,
    'assign_load': DispositionApi.assign_load,
    'unassign_load': DispositionApi.unassign_load,
    'bulk_confirm': DispositionApi.bulk_confirm,
}
