"""이벤트 인프라 (EventPublisher 구현)."""

from load_disposition.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from load_disposition.infra.event.mqtt_event_publisher import (
    MqttEventPublisher,
)

__all__ = ["InMemoryEventPublisher", "MqttEventPublisher"]
