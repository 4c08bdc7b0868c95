"""용량 계산기 단위 테스트."""

import pytest

from load_disposition.domain.entities.load import Load, LoadItem
from load_disposition.domain.enums import Direction
from load_disposition.domain.value_objects.capacity import (
    Capacity,
    calculate_capacity,
)


def _load(load_id, *items):
    return Load(load_id=load_id, direction=Direction.EXPORT, items=items)


class TestCalculateCapacity:
    def test_sums_weight_and_rounds_once(self):
        loads = [
            _load(1, LoadItem(gross_weight=500.125)),
            _load(2, LoadItem(gross_weight=499.126)),
        ]

        result = calculate_capacity(loads)

        assert result.total_weight == 999.25
        assert result.load_count == 2

    def test_sums_all_fields(self, export_load, second_export_load):
        result = calculate_capacity([export_load, second_export_load])

        assert result == Capacity(
            total_volume=18.95,
            total_weight=999.25,
            total_lademetre=4.8,
            load_count=2,
        )

    def test_rounds_half_away_from_zero(self):
        result = calculate_capacity([
            _load(1, LoadItem(gross_weight=0.125, volume=2.675)),
        ])

        assert result.total_weight == 0.13
        assert result.total_volume == 2.68

    def test_rounding_applied_to_total_not_per_item(self):
        items = [LoadItem(lademetre=0.004) for _ in range(3)]

        result = calculate_capacity([_load(1, *items)])

        assert result.total_lademetre == 0.01

    def test_missing_fields_count_as_zero(self):
        result = calculate_capacity([_load(1, LoadItem(), LoadItem())])

        assert result == Capacity(load_count=1)

    def test_load_count_counts_loads_not_items(self):
        loads = [
            _load(1, LoadItem(volume=1.0), LoadItem(volume=2.0)),
            _load(2),
        ]

        result = calculate_capacity(loads)

        assert result.load_count == 2
        assert result.total_volume == 3.0

    def test_empty_input(self):
        assert calculate_capacity([]) == Capacity()

    def test_accepts_generator(self, export_load):
        result = calculate_capacity(ld for ld in [export_load])
        assert result.load_count == 1

    def test_deterministic(self, export_load, second_export_load):
        loads = [export_load, second_export_load]
        assert calculate_capacity(loads) == calculate_capacity(loads)


class TestCapacity:
    def test_frozen(self):
        capacity = Capacity()
        with pytest.raises(AttributeError):
            capacity.total_weight = 1.0
