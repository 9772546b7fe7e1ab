"""Repository for Meal data access"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from domain.models import Meal
from repositories.base import UserOwnedRepository


class MealRepository(UserOwnedRepository[Meal]):
    """Repository for meal log data access"""

    order_by = Meal.created_at

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def list_consumed_between(
        self,
        user_id: UUID,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Meal]:
        """Meals of a user eaten in [start, end), newest first"""
        stmt = select(Meal).where(Meal.user_id == user_id)
        if start is not None:
            stmt = stmt.where(Meal.consumed_at >= start)
        if end is not None:
            stmt = stmt.where(Meal.consumed_at < end)
        return list(self.db.scalars(stmt.order_by(Meal.consumed_at.desc())))
