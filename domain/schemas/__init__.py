"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.common import Link
from domain.schemas.user_schemas import UserCreate, UserUpdate, UserResponse
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealResponse
from domain.schemas.break_record_schemas import (
    BreakRecordCreate,
    BreakRecordUpdate,
    BreakRecordResponse,
)

__all__ = [
    "Link",
    # User schemas
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    # Break record schemas
    "BreakRecordCreate",
    "BreakRecordUpdate",
    "BreakRecordResponse",
]
