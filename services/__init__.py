"""Services package - Business logic layer"""

from services.user_service import UserService
from services.meal_service import MealService
from services.break_record_service import BreakRecordService

__all__ = [
    "UserService",
    "MealService",
    "BreakRecordService",
]
