"""Disposition 값 객체 (불변, 동등성 기반 비교)."""

from load_disposition.domain.value_objects.capacity import (
    Capacity,
    calculate_capacity,
)

__all__ = [
    'Capacity',
    'calculate_capacity',
]
