from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from uuid import UUID

from domain.schemas.common import Link


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr


class UserUpdate(BaseModel):
    """Partial update, omitted fields keep their stored value"""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None


class UserResponse(BaseModel):
    id: UUID
    name: str
    email: str
    links: List[Link] = Field(default_factory=list)

    model_config = {"from_attributes": True}
