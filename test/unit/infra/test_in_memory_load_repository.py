"""InMemoryLoadRepository 단위 테스트."""

import pytest

from load_disposition.domain.entities.load import Load
from load_disposition.domain.enums import Direction
from load_disposition.infra.repository import InMemoryLoadRepository


@pytest.fixture
def repo():
    return InMemoryLoadRepository()


class TestInMemoryLoadRepository:
    def test_get_returns_none_for_unknown(self, repo):
        assert repo.get(1) is None

    def test_save_and_get(self, repo, export_load):
        repo.save(export_load)
        assert repo.get(101) is export_load

    def test_save_overwrites(self, repo, export_load):
        repo.save(export_load)
        renamed = Load(load_id=101, direction=Direction.EXPORT,
                       cargo_name="Renamed")
        repo.save(renamed)
        assert repo.get(101).cargo_name == "Renamed"

    def test_list_by_direction_sorted(self, load_repo):
        exports = load_repo.list_by_direction(Direction.EXPORT)
        imports = load_repo.list_by_direction(Direction.IMPORT)

        assert [ld.load_id for ld in exports] == [101, 102, 103]
        assert [ld.load_id for ld in imports] == [201]

    def test_list_empty(self, repo):
        assert repo.list_by_direction(Direction.IMPORT) == []
