"""페이로드 직렬화 인프라."""

from load_disposition.infra.serialization.payload_serializer import (
    parse_load,
    serialize_bulk_result,
    serialize_disposition_view,
    serialize_event,
    serialize_position_summary,
    to_json,
)

__all__ = [
    "parse_load",
    "serialize_bulk_result",
    "serialize_disposition_view",
    "serialize_event",
    "serialize_position_summary",
    "to_json",
]
