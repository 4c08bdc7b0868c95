r"""Load Disposition CLI 진입점.

화물 seed 파일을 적재하고 작업 plan을 순서대로 실행한 뒤
disposition 뷰를 JSON으로 출력한다.

실행: disposition -c config.yaml -s seed.yaml \\
        -p plan.yaml -t export
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Any

from load_disposition.domain.exceptions import InvalidInputError
from load_disposition.infra.config.yaml_config_loader import YamlConfigLoader
from load_disposition.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from load_disposition.infra.event.mqtt_event_publisher import (
    MqttEventPublisher,
)
from load_disposition.infra.mqtt.mqtt_client import MqttClient
from load_disposition.infra.repository.in_memory_load_repository import (
    InMemoryLoadRepository,
)
from load_disposition.infra.serialization.payload_serializer import (
    parse_load,
    to_json,
)
from load_disposition.presentation.disposition_api import DispositionApi
import yaml

logger = logging.getLogger(__name__)

_MQTT_CONNECT_WAIT_SEC = 5.0


def _read_yaml(path: str | None) -> Any:
    """YAML 파일을 읽는다. 경로가 없으면 None."""
    if not path:
        return None
    with open(Path(path), encoding='utf-8') as f:
        return yaml.safe_load(f)


def load_seed(path: str | None) -> InMemoryLoadRepository:
    """seed 파일의 화물을 저장소에 적재한다.

    형식: ``loads: [{loadId, direction, items: [...]}, ...]``

    Raises:
        InvalidInputError: seed 형식이 잘못되었을 때.
    """
    repo = InMemoryLoadRepository()
    data = _read_yaml(path) or {}
    if not isinstance(data, dict):
        raise InvalidInputError(f'seed 파일 형식 오류: {path}')
    for entry in data.get('loads') or []:
        repo.save(parse_load(entry))
    return repo


def read_plan(path: str | None) -> list[tuple[str, dict[str, Any]]]:
    """plan 파일을 (작업 이름, 인자) 목록으로 읽는다.

    형식: ``steps: [{assign_load: {position_id: 1, load_id: 10}}, ...]``

    Raises:
        InvalidInputError: plan 형식이 잘못되었을 때.
    """
    data = _read_yaml(path)
    if data is None:
        return []
    steps = data.get('steps') if isinstance(data, dict) else data
    if not isinstance(steps, list):
        raise InvalidInputError(f'plan 파일 형식 오류: {path}')

    plan = []
    for step in steps:
        if not isinstance(step, dict) or len(step) != 1:
            raise InvalidInputError(
                f'plan 단계는 작업 하나짜리 mapping이어야 합니다: {step!r}'
            )
        ((operation, params),) = step.items()
        plan.append((operation, params or {}))
    return plan


def main(argv: list[str] | None = None) -> int:
    """Disposition CLI를 실행한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외).

    Returns:
        종료 코드.
    """
    parser = argparse.ArgumentParser(
        prog='disposition',
        description='Consolidate loads into export/import positions',
    )
    parser.add_argument(
        '-c', '--config_file', type=str, default=None,
        help='Path to the config YAML file',
    )
    parser.add_argument(
        '-s', '--seed', type=str, default=None,
        help='Path to the load seed YAML file',
    )
    parser.add_argument(
        '-p', '--plan', type=str, default=None,
        help='Path to the operation plan YAML file',
    )
    parser.add_argument(
        '-t', '--type', dest='disposition_type', default='export',
        choices=['export', 'import'],
        help='Direction of the final disposition view, default: export',
    )
    args = parser.parse_args(argv)

    config = YamlConfigLoader(args.config_file).load()
    logging.basicConfig(
        level=config.logging.level,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    try:
        load_repo = load_seed(args.seed)
        plan = read_plan(args.plan)
    except (OSError, yaml.YAMLError, InvalidInputError) as e:
        logger.error('Failed to read input: %s', e)
        return 1

    mqtt_client = None
    if config.mqtt.enabled:
        mqtt_client = MqttClient(config.mqtt, client_id='load_disposition')
        if not mqtt_client.connect(wait_sec=_MQTT_CONNECT_WAIT_SEC):
            logger.warning(
                'MQTT broker not reachable yet, events may be dropped'
            )
        event_publisher = MqttEventPublisher(
            mqtt_client, config.mqtt.topic_prefix
        )
    else:
        event_publisher = InMemoryEventPublisher()

    api = DispositionApi.create(
        config.disposition,
        load_repo=load_repo,
        event_publisher=event_publisher,
    )

    try:
        for operation, params in plan:
            response = api.dispatch(operation, params)
            print(to_json({'operation': operation, 'response': response}))

        view = api.get_disposition_view(args.disposition_type)
        print(to_json({'operation': 'get_disposition_view',
                       'response': view}))
    finally:
        if mqtt_client is not None:
            mqtt_client.disconnect()

    return 0


if __name__ == '__main__':
    sys.exit(main())
