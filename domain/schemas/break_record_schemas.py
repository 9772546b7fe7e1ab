from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from domain.schemas.common import Link
from domain.schemas.user_schemas import UserResponse


class BreakRecordCreate(BaseModel):
    """Schema for logging a break"""

    user_id: UUID
    type: str = Field(
        ..., min_length=1, description="Free-form tag, e.g. 'quick', 'stretching', 'breathing'"
    )
    duration_minutes: int = Field(0, ge=0)
    mood: str = Field(..., min_length=1, description="How the user felt, e.g. 'tired'")


class BreakRecordUpdate(BaseModel):
    type: Optional[str] = Field(None, min_length=1)
    duration_minutes: Optional[int] = Field(None, ge=0)
    mood: Optional[str] = Field(None, min_length=1)


class BreakRecordResponse(BaseModel):
    id: UUID
    user_id: UUID
    type: str
    duration_minutes: int
    mood: str
    created_at: datetime
    user: Optional[UserResponse] = None
    links: List[Link] = Field(default_factory=list)

    model_config = {"from_attributes": True}
