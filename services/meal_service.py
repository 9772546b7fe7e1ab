from datetime import datetime
from typing import List, Optional
from uuid import UUID
import logging

from domain.models import Meal
from domain.schemas import MealCreate, MealUpdate
from repositories import PersistenceContext
from services.user_service import UserService
from app.exceptions import NotFoundError

logger = logging.getLogger("nutribreak.meals")


class MealService:
    """Business logic for meal logging"""

    @staticmethod
    def log_meal(ctx: PersistenceContext, data: MealCreate) -> Meal:
        """Log a meal for an existing user"""
        UserService.get_user(ctx, data.user_id)

        meal = ctx.meals.add(Meal(**data.model_dump()))
        ctx.save()
        logger.info(
            f"meal_logged meal_id={meal.id} user_id={data.user_id} "
            f"calories={data.calories} time_of_day={data.time_of_day}"
        )
        return meal

    @staticmethod
    def get_meal(
        ctx: PersistenceContext, meal_id: UUID, include_user: bool = False
    ) -> Meal:
        meal = ctx.meals.find(meal_id, include_user=include_user)
        if not meal:
            logger.warning(f"meal_not_found meal_id={meal_id}")
            raise NotFoundError(f"Meal {meal_id} not found")
        return meal

    @staticmethod
    def list_meals(ctx: PersistenceContext, skip: int = 0, limit: int = 100) -> List[Meal]:
        return ctx.meals.get_all(skip=skip, limit=limit)

    @staticmethod
    def list_user_meals(
        ctx: PersistenceContext,
        user_id: UUID,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Meal]:
        """Meals of one user, optionally limited to a consumed_at window"""
        UserService.get_user(ctx, user_id)
        if start is None and end is None:
            return ctx.meals.list_by_user(user_id)
        return ctx.meals.list_consumed_between(user_id, start, end)

    @staticmethod
    def update_meal(ctx: PersistenceContext, meal_id: UUID, data: MealUpdate) -> Meal:
        meal = MealService.get_meal(ctx, meal_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            # description may be cleared, required fields may not
            if value is not None or key == "description":
                setattr(meal, key, value)
        changes = ctx.save()
        logger.info(f"meal_updated meal_id={meal_id} changes={changes}")
        return meal

    @staticmethod
    def delete_meal(ctx: PersistenceContext, meal_id: UUID) -> None:
        meal = MealService.get_meal(ctx, meal_id)
        ctx.meals.remove(meal)
        ctx.save()
        logger.info(f"meal_deleted meal_id={meal_id}")
