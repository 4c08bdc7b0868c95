"""화물 저장소 포트 인터페이스.

화물은 화물 편집 서브시스템이 소유한다.
disposition은 조회만 하며, save는 적재(seed)용이다.
"""

from abc import ABC, abstractmethod

from load_disposition.domain.entities.load import Load
from load_disposition.domain.enums import Direction


class LoadRepository(ABC):
    """화물 조회 인터페이스."""

    @abstractmethod
    def get(self, load_id: int) -> Load | None:
        """화물을 조회한다.

        Args:
            load_id: 화물 ID.

        Returns:
            Load 또는 없으면 None.
        """

    @abstractmethod
    def save(self, load: Load) -> None:
        """화물을 저장한다.

        Args:
            load: 저장할 화물.
        """

    @abstractmethod
    def list_by_direction(self, direction: Direction) -> list[Load]:
        """방향이 일치하는 화물 목록을 ID 순으로 반환한다."""
