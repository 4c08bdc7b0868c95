"""도메인 열거형 단위 테스트."""

from load_disposition.domain.enums import Direction, LoadStatus, PositionState


class TestDirection:
    def test_values(self):
        assert Direction.EXPORT == 'export'
        assert Direction.IMPORT == 'import'

    def test_from_string(self):
        assert Direction('import') is Direction.IMPORT


class TestPositionState:
    def test_all_states_exist(self):
        expected = {'draft', 'confirmed'}
        actual = {s.value for s in PositionState}
        assert actual == expected


class TestLoadStatus:
    def test_contains_backend_statuses(self):
        actual = {s.value for s in LoadStatus}
        assert {'pending', 'in_transit', 'at_customs', 'cancelled'} <= actual
