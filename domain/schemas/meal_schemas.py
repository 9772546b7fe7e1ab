from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from domain.schemas.common import Link
from domain.schemas.user_schemas import UserResponse


class MealCreate(BaseModel):
    """Schema for logging a meal"""

    user_id: UUID
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    calories: int = Field(0, ge=0, description="Energy in kcal")
    time_of_day: str = Field(
        ..., min_length=1, description="Free-form tag, e.g. 'breakfast', 'lunch', 'dinner'"
    )
    consumed_at: Optional[datetime] = Field(
        None, description="When the meal was eaten. Defaults to the time it is logged"
    )


class MealUpdate(BaseModel):
    """Partial update, omitted fields keep their stored value"""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    calories: Optional[int] = Field(None, ge=0)
    time_of_day: Optional[str] = Field(None, min_length=1)
    consumed_at: Optional[datetime] = None


class MealResponse(BaseModel):
    """Schema for meal response"""

    id: UUID
    user_id: UUID
    title: str
    description: Optional[str]
    calories: int
    time_of_day: str
    consumed_at: datetime
    created_at: datetime
    user: Optional[UserResponse] = None
    links: List[Link] = Field(default_factory=list)

    model_config = {"from_attributes": True}
