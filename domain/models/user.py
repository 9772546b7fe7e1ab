"""
User database model.
"""

from sqlalchemy import Column, Text

from domain.models.database import Base, EntityMixin


class User(EntityMixin, Base):
    """User account model.

    Meals and break records point back to the user through ``user_id``; there is
    no ORM collection here, so removing a user never touches them.
    """

    __tablename__ = "users"

    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
