"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import Settings, Environment
from app.exceptions import (
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    IdentityChangeError,
)

__all__ = [
    "Settings",
    "Environment",
    "ServiceValidationError",
    "NotFoundError",
    "ConflictError",
    "IdentityChangeError",
]
