"""
Standardized API response models.
Provides consistent response formatting across all endpoints.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field
from datetime import datetime, timezone


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(default_factory=_now, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    database: str = Field(..., description="Database connectivity")
    timestamp: datetime = Field(default_factory=_now, description="Check timestamp")


class RootResponse(BaseModel):
    """Service banner returned by GET /"""

    name: str
    version: str
    status: str
    timestamp: datetime = Field(default_factory=_now)
    swagger: Optional[str] = None


class DeleteResponse(BaseModel):
    status: str = "ok"
    deleted: str


def error_body(code: str, message: str, details=None) -> dict:
    """Create a standardized error payload (JSON-ready)"""
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {
        "success": False,
        "error": error,
        "timestamp": _now().isoformat(),
    }


ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Resource not found"},
    409: {"model": ErrorResponse, "description": "Constraint violation or conflict"},
}
