"""Repository for BreakRecord data access"""

from sqlalchemy.orm import Session

from domain.models import BreakRecord
from repositories.base import UserOwnedRepository


class BreakRecordRepository(UserOwnedRepository[BreakRecord]):
    """Repository for break activity data access"""

    order_by = BreakRecord.created_at

    def __init__(self, db: Session):
        super().__init__(db, BreakRecord)
