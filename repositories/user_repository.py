"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import User


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    order_by = User.name

    def __init__(self, db: Session):
        super().__init__(db, User)

    def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email (first match, emails are not unique)"""
        stmt = select(User).where(User.email == email).order_by(User.name).limit(1)
        return self.db.scalars(stmt).first()
