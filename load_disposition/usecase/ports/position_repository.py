"""포지션 저장소 포트 인터페이스.

포지션 상태와 화물 소속 관계의 저장/조회를 추상화한다.
인메모리 또는 외부 저장소로 구현 가능하다.
"""

from abc import ABC, abstractmethod

from load_disposition.domain.entities.position import Position
from load_disposition.domain.enums import Direction, PositionState


class PositionRepository(ABC):
    """포지션 저장소 인터페이스.

    포지션 상태와 소속 화물의 기준 저장소(system of record)이다.
    구현체는 저장/반환 시 호출 측과 객체를 공유하지 않아야 한다.
    """

    @abstractmethod
    def next_position_id(self) -> int:
        """새 포지션 ID를 발급한다."""

    @abstractmethod
    def save(self, position: Position) -> None:
        """포지션을 저장한다 (신규/갱신).

        Args:
            position: 저장할 포지션.
        """

    @abstractmethod
    def get(self, position_id: int) -> Position | None:
        """포지션을 조회한다.

        Args:
            position_id: 포지션 ID.

        Returns:
            Position 또는 없으면 None.
        """

    @abstractmethod
    def delete(self, position_id: int) -> None:
        """포지션을 삭제한다.

        Args:
            position_id: 포지션 ID.
        """

    @abstractmethod
    def list_positions(
        self,
        position_type: Direction | None = None,
        state: PositionState | None = None,
    ) -> list[Position]:
        """조건에 맞는 포지션 목록을 ID 순으로 반환한다.

        Args:
            position_type: 유형 필터. None이면 전체.
            state: 상태 필터. None이면 전체.
        """

    @abstractmethod
    def find_draft_by_load(self, load_id: int) -> Position | None:
        """화물이 소속된 draft 포지션을 조회한다.

        Args:
            load_id: 화물 ID.

        Returns:
            소속 draft Position 또는 없으면 None.
        """
