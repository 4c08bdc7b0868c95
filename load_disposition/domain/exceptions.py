"""Disposition 도메인 예외 정의.

모든 예외는 호출 측이 수정 후 재시도할 수 있는 전제조건 위반이다.
``code`` 는 외부 응답에 노출되는 오류 분류 이름이다.
"""


class DomainError(Exception):
    """도메인 계층 기본 예외."""

    code = 'DomainError'


class NotFoundError(DomainError):
    """참조한 포지션 또는 화물이 존재하지 않을 때."""

    code = 'NotFound'


class InvalidStateError(DomainError):
    """현재 라이프사이클 상태에서 허용되지 않는 작업일 때."""

    code = 'InvalidState'


class DirectionMismatchError(DomainError):
    """화물 방향과 포지션 유형이 다를 때."""

    code = 'DirectionMismatch'


class AlreadyAssignedError(DomainError):
    """화물이 이미 다른 draft 포지션에 배정되어 있을 때."""

    code = 'AlreadyAssigned'


class EmptyPositionError(DomainError):
    """화물이 없는 draft 포지션을 확정하려 할 때."""

    code = 'EmptyPosition'


class InvalidInputError(DomainError):
    """요청 값이 잘못되었을 때."""

    code = 'InvalidInput'
