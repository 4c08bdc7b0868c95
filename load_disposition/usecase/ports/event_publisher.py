"""도메인 이벤트 발행 포트.

유스케이스는 저장소 반영이 끝난 뒤 이벤트를 발행한다.
구현체는 프로세스 내 버스일 수도, 브로커 전파를 겸할 수도 있다.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from load_disposition.domain.events.disposition_events import DomainEvent


class EventPublisher(ABC):
    """disposition 이벤트 버스 인터페이스."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """이벤트를 발행한다. 핸들러 실패를 호출자에게 전파하지 않는다."""

    @abstractmethod
    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: Callable[[DomainEvent], None],
    ) -> None:
        """이벤트 타입(하위 타입 포함)에 핸들러를 등록한다."""

    @abstractmethod
    def unsubscribe(
        self,
        event_type: type[DomainEvent],
        handler: Callable[[DomainEvent], None],
    ) -> bool:
        """등록된 핸들러를 해제한다. 해제했으면 True."""
