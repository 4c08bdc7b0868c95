"""paho-mqtt 발행 전용 클라이언트.

disposition 이벤트 전파에 필요한 만큼만 감싼다.
서비스 가용 여부는 ``{topic_prefix}/status`` retained 메시지로 알리며,
비정상 종료 시에는 브로커가 Last Will로 offline을 대신 발행한다.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Any

import paho.mqtt.client as mqtt

from load_disposition.usecase.ports.config_port import MqttConfig

logger = logging.getLogger(__name__)

_QOS_STATUS = 1


class MqttClient:
    """paho-mqtt 래퍼 (발행 전용).

    Args:
        config: MQTT 브로커 접속 설정.
        client_id: MQTT 클라이언트 ID.
    """

    def __init__(self, config: MqttConfig, client_id: str = '') -> None:
        self._config = config
        self._client_id = client_id
        self._status_topic = f"{config.topic_prefix.rstrip('/')}/status"
        self._connected = threading.Event()
        self._publish_lock = threading.Lock()

        self._client = mqtt.Client(
            mqtt.CallbackAPIVersion.VERSION2,
            client_id=client_id,
            protocol=mqtt.MQTTv311,
        )
        self._client.on_connect = self._on_connect
        self._client.on_disconnect = self._on_disconnect
        self._client.reconnect_delay_set(
            min_delay=1, max_delay=config.reconnect_max_delay_sec
        )
        self._client.will_set(
            self._status_topic,
            self._status_payload(online=False),
            qos=_QOS_STATUS,
            retain=True,
        )

    @property
    def is_connected(self) -> bool:
        """MQTT 브로커 연결 여부."""
        return self._connected.is_set()

    @property
    def status_topic(self) -> str:
        return self._status_topic

    def connect(self, wait_sec: float = 0.0) -> bool:
        """브로커에 연결하고 네트워크 루프를 시작한다.

        연결 실패 시에도 루프가 재연결을 계속 시도한다.

        Args:
            wait_sec: 연결 완료를 기다릴 최대 시간 (초). 0이면 기다리지 않는다.

        Returns:
            반환 시점의 연결 여부.
        """
        logger.info(
            'MQTT connecting to %s:%d as %r',
            self._config.broker_host,
            self._config.broker_port,
            self._client_id,
        )
        self._client.connect_async(
            host=self._config.broker_host,
            port=self._config.broker_port,
            keepalive=self._config.keepalive_sec,
        )
        self._client.loop_start()
        if wait_sec > 0:
            self._connected.wait(wait_sec)
        return self.is_connected

    def disconnect(self) -> None:
        """offline 상태를 알린 뒤 연결을 종료한다."""
        if self.is_connected:
            self.publish(
                self._status_topic,
                self._status_payload(online=False),
                qos=_QOS_STATUS,
                retain=True,
            )
        logger.info('MQTT disconnecting')
        self._client.disconnect()
        self._client.loop_stop()
        self._connected.clear()

    def publish(
        self, topic: str, payload: str, qos: int = 0, retain: bool = False
    ) -> bool:
        """메시지를 발행 큐에 넣는다.

        Returns:
            paho가 발행 요청을 수락했으면 True.
        """
        with self._publish_lock:
            info = self._client.publish(
                topic, payload.encode('utf-8'), qos=qos, retain=retain
            )
        if info.rc != mqtt.MQTT_ERR_SUCCESS:
            logger.error(
                'MQTT publish failed: topic=%s, rc=%s', topic, info.rc
            )
            return False
        return True

    def _status_payload(self, online: bool) -> str:
        return json.dumps({'clientId': self._client_id, 'online': online})

    def _on_connect(
        self,
        client: mqtt.Client,
        userdata: Any,
        flags: Any,
        reason_code: Any,
        properties: Any = None,
    ) -> None:
        if reason_code != 0:
            logger.error('MQTT connection refused: %s', reason_code)
            return
        self._connected.set()
        logger.info('MQTT connected, announcing %s', self._status_topic)
        client.publish(
            self._status_topic,
            self._status_payload(online=True),
            qos=_QOS_STATUS,
            retain=True,
        )

    def _on_disconnect(
        self,
        client: mqtt.Client,
        userdata: Any,
        flags: Any,
        reason_code: Any,
        properties: Any = None,
    ) -> None:
        self._connected.clear()
        if reason_code != 0:
            logger.warning(
                'MQTT connection lost (%s), reconnecting', reason_code
            )
