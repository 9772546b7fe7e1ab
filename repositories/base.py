"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.

Repositories only stage work on the session they are given. Nothing here commits;
PersistenceContext.save() is the single commit point.
"""

from typing import Generic, TypeVar, Optional, List, Type
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import set_committed_value
from sqlalchemy import inspect
from abc import ABC

from domain.models import User

ModelType = TypeVar("ModelType")


def _as_uuid(value) -> Optional[UUID]:
    if value is None or isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def _find_tracked(db: Session, model, entity_id):
    entity_id = _as_uuid(entity_id)
    if entity_id is None:
        return None
    for pending in db.new:
        if isinstance(pending, model) and pending.id == entity_id:
            return pending
    entity = db.get(model, entity_id)
    if entity is not None and entity in db.deleted:
        return None
    return entity


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    # Column used to order listings, if the table has a natural one
    order_by = None

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def add(self, entity: ModelType) -> ModelType:
        """Stage a new entity for insertion"""
        if entity is None:
            raise ValueError(f"Cannot add None to {self.model.__name__} repository")
        self.db.add(entity)
        return entity

    def add_range(self, *entities: ModelType) -> List[ModelType]:
        """Stage several entities for insertion"""
        return [self.add(entity) for entity in entities]

    def find(self, entity_id: UUID) -> Optional[ModelType]:
        """
        Get entity by ID.

        Staged (not yet saved) entities are returned as well. Entities staged for
        removal are reported as missing.

        Args:
            entity_id: Entity UUID

        Returns:
            Entity or None if not found
        """
        return _find_tracked(self.db, self.model, entity_id)

    def list_all(self) -> List[ModelType]:
        """All stored entities of this type"""
        stmt = select(self.model)
        if self.order_by is not None:
            stmt = stmt.order_by(self.order_by)
        return list(self.db.scalars(stmt))

    def get_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        """Get all entities with pagination"""
        stmt = select(self.model)
        if self.order_by is not None:
            stmt = stmt.order_by(self.order_by)
        return list(self.db.scalars(stmt.offset(skip).limit(limit)))

    def remove(self, entity: ModelType) -> None:
        """Stage an entity for deletion"""
        if entity is None:
            raise ValueError(
                f"Cannot remove None from {self.model.__name__} repository"
            )
        if inspect(entity).pending:
            # never written, just forget it
            self.db.expunge(entity)
            return
        self.db.delete(entity)

    def exists(self, entity_id: UUID) -> bool:
        """Check if entity exists"""
        return self.find(entity_id) is not None


class UserOwnedRepository(BaseRepository[ModelType]):
    """
    Repository for records that carry a ``user_id`` back-reference.

    The ``user`` relationship is never loaded implicitly. Callers ask for it with
    ``include_user=True`` or ``resolve_user()``.
    """

    def find(
        self, entity_id: UUID, include_user: bool = False
    ) -> Optional[ModelType]:
        entity = super().find(entity_id)
        if entity is not None and include_user:
            self.resolve_user(entity)
        return entity

    def list_by_user(self, user_id: UUID) -> List[ModelType]:
        """All stored records owned by a user"""
        stmt = select(self.model).where(self.model.user_id == user_id)
        if self.order_by is not None:
            stmt = stmt.order_by(self.order_by)
        return list(self.db.scalars(stmt))

    def resolve_user(self, entity: ModelType):
        """Look up the owning user and attach it to ``entity.user``.

        Returns the user, or None when ``user_id`` points nowhere.
        """
        user = _find_tracked(self.db, User, entity.user_id)
        # attach without recording a change, this is a read
        set_committed_value(entity, "user", user)
        return user
