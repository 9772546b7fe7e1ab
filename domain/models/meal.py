"""
Meal log database model.
"""

from sqlalchemy import (
    Column,
    Text,
    ForeignKey,
    UUID,
    Integer,
)
from sqlalchemy.orm import relationship, validates

from domain.models.database import Base, EntityMixin, UTCDateTime, as_utc, utcnow


class Meal(EntityMixin, Base):
    """A meal eaten by a user"""

    __tablename__ = "meals"

    user_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    title = Column(Text, nullable=False)
    description = Column(Text)
    calories = Column(Integer, nullable=False, default=0)
    time_of_day = Column(Text, nullable=False)  # breakfast, lunch, dinner, snack...
    consumed_at = Column(UTCDateTime, nullable=False)
    created_at = Column(UTCDateTime, nullable=False)

    # Only populated on request (include_user / resolve_user)
    user = relationship("User", lazy="noload")

    def __init__(self, **kwargs):
        kwargs.setdefault("created_at", utcnow())
        if kwargs.get("consumed_at") is None:
            kwargs["consumed_at"] = kwargs["created_at"]
        kwargs.setdefault("calories", 0)
        super().__init__(**kwargs)

    @validates("consumed_at", "created_at")
    def _to_utc(self, key, value):
        return as_utc(value)
