"""Disposition 페이로드 JSON 직렬화/역직렬화.

도메인 객체 ↔ API 페이로드 (camelCase) 변환을 담당한다.
snake_case(도메인) ↔ camelCase(외부 페이로드) 변환은
이 모듈에서만 처리한다.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
import json
import math
import re
from typing import Any

from load_disposition.domain.entities.load import Load, LoadItem
from load_disposition.domain.entities.position import Position
from load_disposition.domain.enums import Direction, LoadStatus
from load_disposition.domain.events.disposition_events import DomainEvent
from load_disposition.domain.exceptions import InvalidInputError
from load_disposition.domain.value_objects.capacity import Capacity
from load_disposition.domain.views import DispositionView, PositionSummary
from load_disposition.usecase.bulk_confirm import BulkConfirmResult


# -- snake_case ↔ camelCase 변환 --

_SNAKE_RE = re.compile(r'_([a-z])')
_CAMEL_RE = re.compile(r'([A-Z])')


def _snake_to_camel(name: str) -> str:
    """snake_case → camelCase 변환."""
    return _SNAKE_RE.sub(lambda m: m.group(1).upper(), name)


def _camel_to_snake(name: str) -> str:
    """camelCase → snake_case 변환."""
    return _CAMEL_RE.sub(r'_\1', name).lower()


# -- 직렬화 (도메인 → JSON) --

def _serialize_value(value: Any) -> Any:
    """단일 값을 JSON 호환 타입으로 변환한다."""
    if value is None:
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    if is_dataclass(value) and not isinstance(value, type):
        return _dataclass_to_dict(value)
    return value


def _dataclass_to_dict(
    obj: Any, exclude: frozenset[str] = frozenset()
) -> dict[str, Any]:
    """dataclass를 camelCase JSON dict로 변환한다."""
    result: dict[str, Any] = {}
    for f in fields(obj):
        if f.name in exclude:
            continue
        value = getattr(obj, f.name)
        if value is None:
            continue
        result[_snake_to_camel(f.name)] = _serialize_value(value)
    return result


def serialize_capacity(capacity: Capacity) -> dict[str, Any]:
    """Capacity를 dict로 변환한다."""
    return _dataclass_to_dict(capacity)


def serialize_load(load: Load) -> dict[str, Any]:
    """Load를 dict로 변환한다."""
    data = _dataclass_to_dict(load)
    data['hasHazardousItems'] = load.has_hazardous_items
    return data


def serialize_position(position: Position) -> dict[str, Any]:
    """Position을 dict로 변환한다 (용량 제외)."""
    return _dataclass_to_dict(
        position, exclude=frozenset({'capacity_snapshot'})
    )


def serialize_position_summary(summary: PositionSummary) -> dict[str, Any]:
    """PositionSummary를 포지션 + 화물 + 용량 dict로 변환한다."""
    data = serialize_position(summary.position)
    data['loads'] = [serialize_load(ld) for ld in summary.loads]
    data['loadsCount'] = len(summary.loads)
    data.update(serialize_capacity(summary.capacity))
    return data


def serialize_disposition_view(view: DispositionView) -> dict[str, Any]:
    """DispositionView를 dict로 변환한다."""
    return {
        'draftPositions': [
            serialize_position_summary(s) for s in view.draft_positions
        ],
        'activePositions': [
            serialize_position_summary(s) for s in view.active_positions
        ],
        'unassignedLoads': [
            serialize_load(ld) for ld in view.unassigned_loads
        ],
        'dispositionType': view.disposition_type.value,
    }


def serialize_bulk_result(result: BulkConfirmResult) -> dict[str, Any]:
    """BulkConfirmResult를 {confirmed, errors} dict로 변환한다."""
    return {
        'confirmed': [
            serialize_position_summary(s) for s in result.confirmed
        ],
        'errors': [_dataclass_to_dict(e) for e in result.errors],
    }


def serialize_event(event: DomainEvent) -> dict[str, Any]:
    """도메인 이벤트를 eventType이 포함된 dict로 변환한다."""
    data = _dataclass_to_dict(event)
    data['eventType'] = type(event).__name__
    return data


def to_json(data: Any) -> str:
    """JSON 문자열로 직렬화한다."""
    return json.dumps(data, ensure_ascii=False)


# -- 역직렬화 (JSON → 도메인) --

def _map_keys_to_snake(data: dict[str, Any]) -> dict[str, Any]:
    """dict의 키를 camelCase → snake_case로 변환한다."""
    return {_camel_to_snake(k): v for k, v in data.items()}


_ITEM_FIELDS = frozenset(f.name for f in fields(LoadItem))
_MEASURE_FIELDS = frozenset({
    'gross_weight', 'net_weight', 'width', 'height', 'length',
    'volume', 'lademetre',
})


def _parse_measure(name: str, value: Any) -> float | None:
    """치수/중량 값을 유한한 float로 검증한다. None은 그대로 둔다.

    Raises:
        InvalidInputError: 숫자가 아니거나 bool, 무한대, NaN일 때.
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f'{name} 값은 숫자여야 합니다: {value!r}')
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise InvalidInputError(f'{name} 값이 유한하지 않습니다: {value!r}')
    return number


def parse_load_item(data: dict[str, Any]) -> LoadItem:
    """camelCase dict에서 LoadItem을 파싱한다. 알 수 없는 키는 무시한다.

    Raises:
        InvalidInputError: 품목이 mapping이 아니거나 치수/중량 값이 잘못되었을 때.
    """
    if not isinstance(data, dict):
        raise InvalidInputError(f'품목 데이터가 mapping이 아닙니다: {data!r}')
    values = {
        k: v for k, v in _map_keys_to_snake(data).items()
        if k in _ITEM_FIELDS
    }
    for name in _MEASURE_FIELDS & values.keys():
        values[name] = _parse_measure(name, values[name])
    return LoadItem(**values)


def parse_load(data: dict[str, Any]) -> Load:
    """camelCase dict에서 Load를 파싱한다.

    Raises:
        InvalidInputError: loadId 또는 direction이 잘못되었을 때.
    """
    if not isinstance(data, dict):
        raise InvalidInputError(f'화물 데이터가 mapping이 아닙니다: {data!r}')
    try:
        load_id = int(data['loadId'])
        direction = Direction(data['direction'])
        status = LoadStatus(data.get('status', LoadStatus.PENDING))
    except KeyError as e:
        raise InvalidInputError(f'필수 필드 누락: {e.args[0]}') from None
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f'화물 데이터 오류: {e}') from None

    return Load(
        load_id=load_id,
        direction=direction,
        load_number=data.get('loadNumber', ''),
        cargo_name=data.get('cargoName', ''),
        status=status,
        customer_name=data.get('customerName', ''),
        items=tuple(parse_load_item(i) for i in data.get('items', [])),
    )
