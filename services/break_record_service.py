from typing import List
from uuid import UUID
import logging

from domain.models import BreakRecord
from domain.schemas import BreakRecordCreate, BreakRecordUpdate
from repositories import PersistenceContext
from services.user_service import UserService
from app.exceptions import NotFoundError

logger = logging.getLogger("nutribreak.breaks")


class BreakRecordService:
    """Business logic for break activity logging"""

    @staticmethod
    def log_break(ctx: PersistenceContext, data: BreakRecordCreate) -> BreakRecord:
        UserService.get_user(ctx, data.user_id)

        record = ctx.break_records.add(BreakRecord(**data.model_dump()))
        ctx.save()
        logger.info(
            f"break_logged break_id={record.id} user_id={data.user_id} "
            f"type={data.type} duration_minutes={data.duration_minutes}"
        )
        return record

    @staticmethod
    def get_break(
        ctx: PersistenceContext, break_id: UUID, include_user: bool = False
    ) -> BreakRecord:
        record = ctx.break_records.find(break_id, include_user=include_user)
        if not record:
            logger.warning(f"break_not_found break_id={break_id}")
            raise NotFoundError(f"Break record {break_id} not found")
        return record

    @staticmethod
    def list_breaks(
        ctx: PersistenceContext, skip: int = 0, limit: int = 100
    ) -> List[BreakRecord]:
        return ctx.break_records.get_all(skip=skip, limit=limit)

    @staticmethod
    def list_user_breaks(ctx: PersistenceContext, user_id: UUID) -> List[BreakRecord]:
        UserService.get_user(ctx, user_id)
        return ctx.break_records.list_by_user(user_id)

    @staticmethod
    def update_break(
        ctx: PersistenceContext, break_id: UUID, data: BreakRecordUpdate
    ) -> BreakRecord:
        record = BreakRecordService.get_break(ctx, break_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(record, key, value)
        changes = ctx.save()
        logger.info(f"break_updated break_id={break_id} changes={changes}")
        return record

    @staticmethod
    def delete_break(ctx: PersistenceContext, break_id: UUID) -> None:
        record = BreakRecordService.get_break(ctx, break_id)
        ctx.break_records.remove(record)
        ctx.save()
        logger.info(f"break_deleted break_id={break_id}")
