"""BreakRecord ORM -> DTO mapping."""

from domain.models import BreakRecord
from domain.schemas import BreakRecordResponse, Link
from domain.mappers.links import resource_links
from domain.mappers.user_mapper import UserMapper


class BreakRecordMapper:
    @staticmethod
    def to_response(record: BreakRecord, base_path: str = "") -> BreakRecordResponse:
        links = resource_links(base_path, "break-records", record.id)
        links.append(Link(rel="owner", href=f"{base_path}/users/{record.user_id}"))
        user = UserMapper.to_response(record.user, base_path) if record.user else None

        return BreakRecordResponse(
            id=record.id,
            user_id=record.user_id,
            type=record.type,
            duration_minutes=record.duration_minutes,
            mood=record.mood,
            created_at=record.created_at,
            user=user,
            links=links,
        )
