"""화물(Load) 엔티티."""

from dataclasses import dataclass, field

from load_disposition.domain.enums import Direction, LoadStatus


@dataclass(frozen=True)
class LoadItem:
    """화물을 구성하는 물리적 단위(포장/피스).

    disposition 입장에서는 불변이다. 수정은 화물 편집 서브시스템이 담당한다.

    Args:
        gross_weight: 총중량 (kg).
        net_weight: 순중량 (kg).
        width: 너비 (m).
        height: 높이 (m).
        length: 길이 (m).
        volume: 부피 (m³).
        lademetre: 적재 미터 (LDM).
        package_type: 포장 유형 (e.g. 'pallet').
        package_count: 포장 수.
        piece_count: 피스 수.
        is_stackable: 적층 가능 여부.
        is_hazardous: 위험물 여부.
        hazmat_un_no: 위험물 UN 번호.
        hazmat_class: 위험물 등급.
        cargo_name: 품명.
    """

    gross_weight: float | None = None
    net_weight: float | None = None
    width: float | None = None
    height: float | None = None
    length: float | None = None
    volume: float | None = None
    lademetre: float | None = None
    package_type: str = ''
    package_count: int = 0
    piece_count: int = 0
    is_stackable: bool = False
    is_hazardous: bool = False
    hazmat_un_no: str = ''
    hazmat_class: str = ''
    cargo_name: str = ''


@dataclass(frozen=True)
class Load:
    """개별 예약 가능한 화물.

    포지션 소속 여부는 포지션이 보유하며, 화물 자신은 알지 못한다.

    Args:
        load_id: 화물 고유 ID.
        direction: 화물 방향 (export/import).
        load_number: 화물 번호.
        cargo_name: 화물 설명.
        status: 화물 상태.
        customer_name: 고객명.
        items: 화물 구성 품목.
    """

    load_id: int
    direction: Direction
    load_number: str = ''
    cargo_name: str = ''
    status: LoadStatus = LoadStatus.PENDING
    customer_name: str = ''
    items: tuple[LoadItem, ...] = field(default_factory=tuple)

    @property
    def has_hazardous_items(self) -> bool:
        """위험물 품목 포함 여부."""
        return any(item.is_hazardous for item in self.items)
