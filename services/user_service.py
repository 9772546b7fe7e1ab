from typing import List, Optional
from uuid import UUID
import logging

from domain.models import User
from domain.schemas import UserCreate, UserUpdate
from repositories import PersistenceContext
from app.exceptions import NotFoundError, ConflictError

logger = logging.getLogger("nutribreak.users")


class UserService:
    """Business logic for user accounts"""

    @staticmethod
    def create_user(ctx: PersistenceContext, data: UserCreate) -> User:
        """Create new user"""
        user = ctx.users.add(User(name=data.name, email=data.email))
        ctx.save()
        logger.info(f"user_created user_id={user.id} email={data.email}")
        return user

    @staticmethod
    def get_user(ctx: PersistenceContext, user_id: UUID) -> User:
        user = ctx.users.find(user_id)
        if not user:
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError(f"User {user_id} not found")
        return user

    @staticmethod
    def list_users(ctx: PersistenceContext, skip: int = 0, limit: int = 100) -> List[User]:
        return ctx.users.get_all(skip=skip, limit=limit)

    @staticmethod
    def find_by_email(ctx: PersistenceContext, email: str) -> Optional[User]:
        return ctx.users.find_by_email(email)

    @staticmethod
    def update_user(ctx: PersistenceContext, user_id: UUID, data: UserUpdate) -> User:
        """Apply the fields present in ``data`` and save"""
        user = UserService.get_user(ctx, user_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(user, key, value)
        changes = ctx.save()
        logger.info(f"user_updated user_id={user_id} changes={changes}")
        return user

    @staticmethod
    def delete_user(ctx: PersistenceContext, user_id: UUID) -> None:
        """
        Delete a user.

        Meals and break records are never removed as a side effect, so a user who
        still owns any is rejected with ConflictError.
        """
        user = UserService.get_user(ctx, user_id)
        meal_count = len(ctx.meals.list_by_user(user_id))
        break_count = len(ctx.break_records.list_by_user(user_id))
        if meal_count or break_count:
            logger.warning(
                f"user_delete_blocked user_id={user_id} "
                f"meals={meal_count} break_records={break_count}"
            )
            raise ConflictError(
                f"User {user_id} still owns {meal_count} meal(s) and "
                f"{break_count} break record(s)",
                code="USER_HAS_RECORDS",
            )
        ctx.users.remove(user)
        ctx.save()
        logger.info(f"user_deleted user_id={user_id}")
