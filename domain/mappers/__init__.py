"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.user_mapper import UserMapper
from domain.mappers.meal_mapper import MealMapper
from domain.mappers.break_record_mapper import BreakRecordMapper

__all__ = ["UserMapper", "MealMapper", "BreakRecordMapper"]
