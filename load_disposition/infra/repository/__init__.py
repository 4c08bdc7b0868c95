"""저장소 인프라 (PositionRepository, LoadRepository 구현)."""

from load_disposition.infra.repository.in_memory_load_repository import (
    InMemoryLoadRepository,
)
from load_disposition.infra.repository.in_memory_position_repository import (
    InMemoryPositionRepository,
)

__all__ = ["InMemoryLoadRepository", "InMemoryPositionRepository"]
