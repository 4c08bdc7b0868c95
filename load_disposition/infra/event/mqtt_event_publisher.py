"""MQTT 도메인 이벤트 발행자 구현체.

로컬 핸들러 호출 후 이벤트를 JSON으로 MQTT 브로커에 전파한다.
토픽 형식: {topic_prefix}/{EventName}
"""

import logging

from load_disposition.domain.events.disposition_events import DomainEvent
from load_disposition.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from load_disposition.infra.mqtt.mqtt_client import MqttClient
from load_disposition.infra.serialization.payload_serializer import (
    serialize_event,
    to_json,
)

logger = logging.getLogger(__name__)

_QOS_EVENT = 1


class MqttEventPublisher(InMemoryEventPublisher):
    """EventPublisher의 MQTT 구현체.

    Args:
        mqtt_client: MQTT 클라이언트 래퍼.
        topic_prefix: 이벤트 토픽 prefix.
    """

    def __init__(self, mqtt_client: MqttClient, topic_prefix: str) -> None:
        super().__init__()
        self._client = mqtt_client
        self._topic_prefix = topic_prefix.rstrip('/')

    def publish(self, event: DomainEvent) -> None:
        """로컬 핸들러에 전달한 뒤 MQTT로 발행한다.

        브로커 미연결 시에는 경고만 남긴다.
        상태 변경은 이미 저장소에 반영되었기 때문이다.
        """
        super().publish(event)

        topic = f"{self._topic_prefix}/{type(event).__name__}"
        if not self._client.is_connected:
            logger.warning("MQTT not connected, event dropped: %s", topic)
            return
        self._client.publish(
            topic, to_json(serialize_event(event)), qos=_QOS_EVENT
        )
