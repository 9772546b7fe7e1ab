"""
Break activity database model.
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


class BreakRecord(EntityMixin, Base):
    """A break taken by a user (stretching, breathing, quick walk...)"""

    __tablename__ = "break_records"

    user_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    type = Column(Text, nullable=False)
    duration_minutes = Column(Integer, nullable=False, default=0)
    mood = Column(Text, nullable=False)
    created_at = Column(UTCDateTime, nullable=False)

    user = relationship("User", lazy="noload")

    def __init__(self, **kwargs):
        kwargs.setdefault("created_at", utcnow())
        kwargs.setdefault("duration_minutes", 0)
        super().__init__(**kwargs)

    @validates("created_at")
    def _to_utc(self, key, value):
        return as_utc(value)
