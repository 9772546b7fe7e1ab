"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, UserOwnedRepository
from repositories.user_repository import UserRepository
from repositories.meal_repository import MealRepository
from repositories.break_record_repository import BreakRecordRepository
from repositories.context import PersistenceContext

__all__ = [
    "BaseRepository",
    "UserOwnedRepository",
    "UserRepository",
    "MealRepository",
    "BreakRecordRepository",
    "PersistenceContext",
]
