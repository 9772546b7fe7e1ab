"""Meal ORM -> DTO mapping."""

from domain.models import Meal
from domain.schemas import MealResponse, Link
from domain.mappers.links import resource_links
from domain.mappers.user_mapper import UserMapper


class MealMapper:
    @staticmethod
    def to_response(meal: Meal, base_path: str = "") -> MealResponse:
        links = resource_links(base_path, "meals", meal.id)
        links.append(Link(rel="owner", href=f"{base_path}/users/{meal.user_id}"))

        # user is only present when the caller asked for it
        user = UserMapper.to_response(meal.user, base_path) if meal.user else None

        return MealResponse(
            id=meal.id,
            user_id=meal.user_id,
            title=meal.title,
            description=meal.description,
            calories=meal.calories,
            time_of_day=meal.time_of_day,
            consumed_at=meal.consumed_at,
            created_at=meal.created_at,
            user=user,
            links=links,
        )
