"""포지션 용량 값 객체 및 계산기."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from load_disposition.domain.entities.load import Load

_TWO_PLACES = Decimal('0.01')


@dataclass(frozen=True)
class Capacity:
    """포지션 단위 물리 용량 합계.

    Args:
        total_volume: 총 부피 (m³).
        total_weight: 총 중량 (kg).
        total_lademetre: 총 적재 미터 (LDM).
        load_count: 화물 수 (품목 수가 아님).
    """

    total_volume: float = 0.0
    total_weight: float = 0.0
    total_lademetre: float = 0.0
    load_count: int = 0


def _to_decimal(value: float | None) -> Decimal:
    """float를 Decimal로 변환한다. None은 0으로 취급한다."""
    if value is None:
        return Decimal(0)
    return Decimal(str(value))


def _round(total: Decimal) -> float:
    """소수 둘째 자리로 반올림한다 (ROUND_HALF_UP: 0에서 먼 쪽)."""
    return float(total.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def calculate_capacity(loads: Iterable[Load]) -> Capacity:
    """화물 목록의 품목 값을 합산하여 용량을 계산한다.

    반올림은 최종 합계에 한 번만 적용하여 누적 오차를 막는다.
    부작용이 없는 순수 함수로, 동시 호출해도 안전하다.

    Args:
        loads: 합산할 화물 목록.

    Returns:
        합산된 Capacity.
    """
    volume = Decimal(0)
    weight = Decimal(0)
    lademetre = Decimal(0)
    load_count = 0

    for load in loads:
        load_count += 1
        for item in load.items:
            volume += _to_decimal(item.volume)
            weight += _to_decimal(item.gross_weight)
            lademetre += _to_decimal(item.lademetre)

    return Capacity(
        total_volume=_round(volume),
        total_weight=_round(weight),
        total_lademetre=_round(lademetre),
        load_count=load_count,
    )
