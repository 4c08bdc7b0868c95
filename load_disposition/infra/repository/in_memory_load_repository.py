"""인메모리 화물 저장소 구현체."""

import threading

from load_disposition.domain.entities.load import Load
from load_disposition.domain.enums import Direction
from load_disposition.usecase.ports.load_repository import LoadRepository


class InMemoryLoadRepository(LoadRepository):
    """LoadRepository의 인메모리 구현체.

    Load는 불변 객체이므로 복사 없이 저장한다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._loads: dict[int, Load] = {}

    def get(self, load_id: int) -> Load | None:
        with self._lock:
            return self._loads.get(load_id)

    def save(self, load: Load) -> None:
        with self._lock:
            self._loads[load.load_id] = load

    def list_by_direction(self, direction: Direction) -> list[Load]:
        with self._lock:
            return [
                load for _, load in sorted(self._loads.items())
                if load.direction == direction
            ]
