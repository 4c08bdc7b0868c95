"""공통 테스트 fixture."""

import pytest

from load_disposition.domain.entities.load import Load, LoadItem
from load_disposition.domain.enums import Direction, LoadStatus
from load_disposition.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from load_disposition.infra.locking.keyed_lock_provider import (
    KeyedLockProvider,
)
from load_disposition.infra.repository.in_memory_load_repository import (
    InMemoryLoadRepository,
)
from load_disposition.infra.repository.in_memory_position_repository import (
    InMemoryPositionRepository,
)
from load_disposition.usecase.assign_load import LoadAssignmentManager
from load_disposition.usecase.bulk_confirm import BulkConfirmPositions
from load_disposition.usecase.confirm_position import ConfirmPosition
from load_disposition.usecase.manage_positions import ManagePositions
from load_disposition.usecase.ports.config_port import (
    AppConfig,
    DispositionConfig,
    LoggingConfig,
    MqttConfig,
)


@pytest.fixture
def export_load():
    return Load(
        load_id=101,
        direction=Direction.EXPORT,
        load_number="YK-0101",
        cargo_name="Textile rolls",
        status=LoadStatus.CONFIRMED,
        items=(
            LoadItem(gross_weight=500.125, volume=12.4, lademetre=3.2),
        ),
    )


@pytest.fixture
def second_export_load():
    return Load(
        load_id=102,
        direction=Direction.EXPORT,
        load_number="YK-0102",
        cargo_name="Machine parts",
        items=(
            LoadItem(gross_weight=499.126, volume=6.05, lademetre=1.6),
            LoadItem(volume=0.5, is_hazardous=True, hazmat_un_no="UN1263"),
        ),
    )


@pytest.fixture
def third_export_load():
    return Load(load_id=103, direction=Direction.EXPORT, load_number="YK-0103")


@pytest.fixture
def import_load():
    return Load(
        load_id=201,
        direction=Direction.IMPORT,
        load_number="YK-0201",
        items=(LoadItem(gross_weight=1200.0, volume=20.0, lademetre=6.8),),
    )


@pytest.fixture
def load_repo(export_load, second_export_load, third_export_load, import_load):
    repo = InMemoryLoadRepository()
    for load in (
        export_load, second_export_load, third_export_load, import_load
    ):
        repo.save(load)
    return repo


@pytest.fixture
def position_repo():
    return InMemoryPositionRepository()


@pytest.fixture
def publisher():
    return InMemoryEventPublisher()


@pytest.fixture
def lock_provider():
    return KeyedLockProvider()


@pytest.fixture
def disposition_config():
    return DispositionConfig(
        export_number_prefix="EXP",
        import_number_prefix="IMP",
        number_width=4,
    )


@pytest.fixture
def manage(position_repo, load_repo, publisher, lock_provider,
           disposition_config):
    return ManagePositions(
        position_repo, load_repo, publisher, lock_provider,
        disposition_config,
    )


@pytest.fixture
def assignment(position_repo, load_repo, publisher, lock_provider):
    return LoadAssignmentManager(
        position_repo, load_repo, publisher, lock_provider
    )


@pytest.fixture
def confirmer(position_repo, load_repo, publisher, lock_provider):
    return ConfirmPosition(position_repo, load_repo, publisher, lock_provider)


@pytest.fixture
def bulk(confirmer, publisher):
    return BulkConfirmPositions(confirmer, publisher)


@pytest.fixture
def sample_config():
    return AppConfig(
        disposition=DispositionConfig(number_width=4),
        mqtt=MqttConfig(broker_host="localhost", broker_port=1883),
        logging=LoggingConfig(level="DEBUG"),
    )
