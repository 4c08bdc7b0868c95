"""프로세스 내 키 단위 잠금 제공자 구현체."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, field
import logging
import threading

from load_disposition.usecase.ports.lock_provider import LockProvider

logger = logging.getLogger(__name__)


@dataclass
class _LockEntry:
    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


class KeyedLockProvider(LockProvider):
    """LockProvider의 threading.Lock 구현체.

    키마다 Lock을 필요할 때 생성하고,
    대기/보유 중인 스레드가 없어지면 제거한다.
    재진입은 지원하지 않는다.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Hashable, _LockEntry] = {}

    def position_lock(
        self, position_id: int
    ) -> AbstractContextManager[None]:
        return self._hold(('position', position_id))

    def load_lock(self, load_id: int) -> AbstractContextManager[None]:
        return self._hold(('load', load_id))

    @property
    def active_keys(self) -> int:
        """현재 유지 중인 키 수."""
        with self._guard:
            return len(self._locks)

    @contextmanager
    def _hold(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = _LockEntry()
            entry.users += 1

        entry.lock.acquire()
        logger.debug('Lock acquired: %s', key)
        try:
            yield
        finally:
            entry.lock.release()
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[key]
