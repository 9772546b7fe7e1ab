"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    Database,
    EntityMixin,
    UTCDateTime,
    as_utc,
    utcnow,
)
from domain.models.user import User
from domain.models.meal import Meal
from domain.models.break_record import BreakRecord

__all__ = [
    # Database
    "Base",
    "Database",
    "EntityMixin",
    "UTCDateTime",
    "as_utc",
    "utcnow",
    # Entities
    "User",
    "Meal",
    "BreakRecord",
]
