"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from load_disposition.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    DispositionConfig,
    LoggingConfig,
    MqttConfig,
)
from load_disposition.usecase.ports.event_publisher import EventPublisher
from load_disposition.usecase.ports.load_repository import LoadRepository
from load_disposition.usecase.ports.lock_provider import LockProvider
from load_disposition.usecase.ports.position_repository import (
    PositionRepository,
)

__all__ = [
    "AppConfig",
    "ConfigPort",
    "DispositionConfig",
    "EventPublisher",
    "LoadRepository",
    "LockProvider",
    "LoggingConfig",
    "MqttConfig",
    "PositionRepository",
]
