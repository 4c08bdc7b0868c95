"""인메모리 도메인 이벤트 버스 구현체."""

import logging
import threading
from collections import defaultdict
from collections.abc import Callable

from load_disposition.domain.events.disposition_events import DomainEvent
from load_disposition.usecase.ports.event_publisher import EventPublisher

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class InMemoryEventPublisher(EventPublisher):
    """EventPublisher의 인메모리 구현체.

    발행한 스레드에서 동기적으로 핸들러를 호출한다.
    상위 이벤트 타입에 등록한 핸들러도 함께 호출되므로
    ``DomainEvent`` 구독은 모든 disposition 이벤트를 받는다.
    호출 순서는 구체 타입 핸들러가 먼저, 같은 타입 안에서는 등록 순서이다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = (
            defaultdict(list)
        )

    def publish(self, event: DomainEvent) -> None:
        """이벤트를 구독 핸들러에 전달한다.

        핸들러 예외는 로깅만 한다. 이벤트는 저장소 반영 이후에 발행되므로
        핸들러 실패가 이미 끝난 작업을 실패로 바꾸지 않는다.
        """
        handlers = self._handlers_for(type(event))
        logger.debug(
            "Publishing %s to %d handler(s)",
            type(event).__name__, len(handlers),
        )
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Event handler %r failed on %s",
                    handler, type(event).__name__,
                )

    def subscribe(
        self, event_type: type[DomainEvent], handler: EventHandler
    ) -> None:
        with self._lock:
            self._handlers[event_type].append(handler)
        logger.debug("Subscribed to %s", event_type.__name__)

    def unsubscribe(
        self, event_type: type[DomainEvent], handler: EventHandler
    ) -> bool:
        """구독을 해제한다.

        Returns:
            등록되어 있던 핸들러를 제거했으면 True.
        """
        with self._lock:
            handlers = self._handlers.get(event_type, [])
            if handler not in handlers:
                return False
            handlers.remove(handler)
            return True

    def _handlers_for(self, event_type: type) -> list[EventHandler]:
        with self._lock:
            return [
                handler
                for klass in event_type.__mro__
                if issubclass(klass, DomainEvent)
                for handler in self._handlers.get(klass, [])
            ]
