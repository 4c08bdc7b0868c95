"""YAML 설정 파일 로더."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from load_disposition.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    DispositionConfig,
    LoggingConfig,
    MqttConfig,
)

logger = logging.getLogger(__name__)

PACKAGED_CONFIG = (
    Path(__file__).resolve().parent.parent.parent
    / 'config'
    / 'default_params.yaml'
)

_ROOT_KEY = 'load_disposition'
_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _build_disposition(data: dict[str, Any]) -> DispositionConfig:
    defaults = DispositionConfig()
    width = int(data.get('number_width', defaults.number_width))
    if width < 1:
        logger.warning(
            'number_width %d is not positive, using %d',
            width, defaults.number_width,
        )
        width = defaults.number_width
    return DispositionConfig(
        export_number_prefix=str(
            data.get('export_number_prefix', defaults.export_number_prefix)
        ),
        import_number_prefix=str(
            data.get('import_number_prefix', defaults.import_number_prefix)
        ),
        number_width=width,
    )


def _build_mqtt(data: dict[str, Any]) -> MqttConfig:
    defaults = MqttConfig()
    return MqttConfig(
        enabled=bool(data.get('enabled', defaults.enabled)),
        broker_host=str(data.get('broker_host', defaults.broker_host)),
        broker_port=int(data.get('broker_port', defaults.broker_port)),
        keepalive_sec=int(data.get('keepalive_sec', defaults.keepalive_sec)),
        reconnect_max_delay_sec=int(data.get(
            'reconnect_max_delay_sec', defaults.reconnect_max_delay_sec
        )),
        topic_prefix=str(data.get('topic_prefix', defaults.topic_prefix)),
    )


def _build_logging(data: dict[str, Any]) -> LoggingConfig:
    level = str(data.get('level', LoggingConfig().level)).upper()
    if level not in _LOG_LEVELS:
        logger.warning('Unknown log level %r, using INFO', level)
        level = 'INFO'
    return LoggingConfig(level=level)


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    ``load_disposition`` 최상위 키 아래 또는 파일 최상위의
    disposition / mqtt / logging 섹션을 읽는다.
    파일이 없거나 mapping이 아니면 전부 기본값을 사용하고,
    섹션이나 키가 빠진 경우 해당 값만 기본값을 사용한다.

    Args:
        config_path: 설정 파일 경로. None이면 패키지 기본 설정.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        self._path = Path(config_path) if config_path else PACKAGED_CONFIG

    def load(self) -> AppConfig:
        params = self._read_params()
        config = AppConfig(
            disposition=_build_disposition(
                self._section(params, 'disposition')
            ),
            mqtt=_build_mqtt(self._section(params, 'mqtt')),
            logging=_build_logging(self._section(params, 'logging')),
        )
        logger.info('Config loaded from %s', self._path)
        return config

    def _read_params(self) -> dict[str, Any]:
        if not self._path.exists():
            logger.warning(
                'Config file not found: %s, using defaults', self._path
            )
            return {}

        with open(self._path, encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            logger.warning(
                'Config %s is not a mapping, using defaults', self._path
            )
            return {}

        params = data.get(_ROOT_KEY, data)
        return params if isinstance(params, dict) else {}

    @staticmethod
    def _section(params: dict[str, Any], name: str) -> dict[str, Any]:
        section = params.get(name) or {}
        return section if isinstance(section, dict) else {}
