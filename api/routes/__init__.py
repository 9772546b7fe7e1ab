"""API routes package"""

from . import users, meals, break_records, health

__all__ = ["users", "meals", "break_records", "health"]
