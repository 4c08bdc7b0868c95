"""상호 배제 범위 포트 인터페이스.

포지션/화물 단위의 상호 배제를 추상화한다.
프로세스 내 mutex 또는 DB 행 잠금으로 구현 가능하다.

잠금 순서는 항상 화물 → 포지션이다.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class LockProvider(ABC):
    """키 단위 잠금 제공자 인터페이스."""

    @abstractmethod
    def position_lock(self, position_id: int) -> AbstractContextManager[None]:
        """포지션 하나에 대한 배타 범위를 반환한다.

        Args:
            position_id: 포지션 ID.
        """

    @abstractmethod
    def load_lock(self, load_id: int) -> AbstractContextManager[None]:
        """화물 하나에 대한 배타 범위를 반환한다.

        Args:
            load_id: 화물 ID.
        """
