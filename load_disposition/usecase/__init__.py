"""Load Disposition 유스케이스 레이어.

도메인 로직을 포트를 통해 조율하는 애플리케이션 서비스를 정의한다.
domain 레이어만 의존하며, infra 레이어 의존성은 없다.
"""

from load_disposition.usecase.assign_load import LoadAssignmentManager
from load_disposition.usecase.bulk_confirm import (
    BulkConfirmPositions,
    BulkConfirmResult,
    ConfirmationFailed,
    ConfirmationSucceeded,
)
from load_disposition.usecase.confirm_position import ConfirmPosition
from load_disposition.usecase.manage_positions import ManagePositions

__all__ = [
    "BulkConfirmPositions",
    "BulkConfirmResult",
    "ConfirmPosition",
    "ConfirmationFailed",
    "ConfirmationSucceeded",
    "LoadAssignmentManager",
    "ManagePositions",
]
