"""
Persistence context - one unit of work over a SQLAlchemy session.

Repositories stage adds, removes and attribute changes; save() writes all of
them in a single transaction. Storage errors are rolled back and re-raised
untouched so callers see the original IntegrityError / StaleDataError.
"""

import logging
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from app.exceptions import IdentityChangeError
from domain.models import EntityMixin
from repositories.user_repository import UserRepository
from repositories.meal_repository import MealRepository
from repositories.break_record_repository import BreakRecordRepository

logger = logging.getLogger("nutribreak.persistence")


class PersistenceContext:
    """Unit of work exposing users, meals and break_records"""

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepository(session)
        self.meals = MealRepository(session)
        self.break_records = BreakRecordRepository(session)

    def has_changes(self) -> bool:
        return self._pending_count() > 0

    def save(self) -> int:
        """
        Commit every staged change as one transaction.

        Returns:
            Number of entities inserted, updated or deleted (0 if nothing was staged)

        Raises:
            IdentityChangeError: a tracked entity had its id reassigned
            sqlalchemy.exc.IntegrityError: a constraint was violated
            sqlalchemy.orm.exc.StaleDataError: the row changed underneath us
        """
        try:
            self._check_identities()
            count = self._pending_count()
            self.session.commit()
        except Exception as exc:
            self.session.rollback()
            logger.warning(f"save_failed error={type(exc).__name__}: {exc}")
            raise
        if count:
            logger.debug(f"save_committed changes={count}")
        return count

    def rollback(self) -> None:
        """Discard staged changes"""
        self.session.rollback()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "PersistenceContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        if exc_type is not None:
            self.session.rollback()
        self.close()
        return None

    def _pending_count(self) -> int:
        session = self.session
        modified = sum(1 for obj in session.dirty if session.is_modified(obj))
        return len(session.new) + modified + len(session.deleted)

    def _check_identities(self) -> None:
        for obj in self.session.dirty:
            if not isinstance(obj, EntityMixin):
                continue
            state = inspect(obj)
            # only look at ids set in memory, never trigger a load here
            if state.identity is None or "id" not in state.dict:
                continue
            if state.identity[0] != state.dict["id"]:
                raise IdentityChangeError(
                    type(obj).__name__, state.identity[0], state.dict["id"]
                )
