"""Disposition 도메인 엔티티."""

from load_disposition.domain.entities.load import Load, LoadItem
from load_disposition.domain.entities.position import Position

__all__ = [
    'Load',
    'LoadItem',
    'Position',
]
