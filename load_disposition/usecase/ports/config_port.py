"""설정 포트 인터페이스.

애플리케이션 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from load_disposition.domain.enums import Direction


@dataclass(frozen=True)
class DispositionConfig:
    """포지션 번호 발급 설정.

    Args:
        export_number_prefix: 수출 포지션 번호 prefix.
        import_number_prefix: 수입 포지션 번호 prefix.
        number_width: 번호 숫자부 자릿수 (0 채움).
    """

    export_number_prefix: str = 'EXP'
    import_number_prefix: str = 'IMP'
    number_width: int = 6

    def format_position_number(
        self, position_type: Direction, position_id: int
    ) -> str:
        """포지션 번호를 생성한다 (e.g. 'EXP-000001')."""
        prefix = (
            self.export_number_prefix
            if position_type == Direction.EXPORT
            else self.import_number_prefix
        )
        return f'{prefix}-{position_id:0{self.number_width}d}'


@dataclass(frozen=True)
class MqttConfig:
    """MQTT 브로커 접속 및 이벤트 전파 설정.

    Args:
        enabled: 도메인 이벤트를 MQTT로 전파할지 여부.
        broker_host: 브로커 호스트 주소.
        broker_port: 브로커 포트 번호.
        keepalive_sec: 연결 유지 간격 (초).
        reconnect_max_delay_sec: 재연결 최대 대기 시간 (초).
        topic_prefix: 이벤트 토픽 prefix.
    """

    enabled: bool = False
    broker_host: str = 'localhost'
    broker_port: int = 1883
    keepalive_sec: int = 60
    reconnect_max_delay_sec: int = 60
    topic_prefix: str = 'disposition/events'


@dataclass(frozen=True)
class LoggingConfig:
    """로깅 설정.

    Args:
        level: 루트 로그 레벨 이름.
    """

    level: str = 'INFO'


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 전체 설정."""

    disposition: DispositionConfig = field(default_factory=DispositionConfig)
    mqtt: MqttConfig = field(default_factory=MqttConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> AppConfig:
        """설정을 로드한다.

        Returns:
            AppConfig.
        """
