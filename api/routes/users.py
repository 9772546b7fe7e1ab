"""User management routes"""

from fastapi import APIRouter, Depends, Query, status
from uuid import UUID
from typing import List, Optional
from datetime import datetime

from api.dependencies import get_db, get_base_path
from api.responses import DeleteResponse, ERROR_RESPONSES
from domain.schemas import (
    UserCreate,
    UserUpdate,
    UserResponse,
    MealResponse,
    BreakRecordResponse,
)
from domain.mappers import UserMapper, MealMapper, BreakRecordMapper
from repositories import PersistenceContext
from services import UserService, MealService, BreakRecordService

router = APIRouter(prefix="/users", tags=["Users"], responses=ERROR_RESPONSES)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user: UserCreate,
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    """Create a new user from JSON body"""
    new_user = UserService.create_user(ctx, user)
    return UserMapper.to_response(new_user, base_path)


@router.get("", response_model=List[UserResponse])
def get_all_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    """Return all users."""
    users = UserService.list_users(ctx, skip=skip, limit=limit)
    return [UserMapper.to_response(u, base_path) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: UUID,
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    user = UserService.get_user(ctx, user_id)
    return UserMapper.to_response(user, base_path)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: UUID,
    changes: UserUpdate,
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    user = UserService.update_user(ctx, user_id, changes)
    return UserMapper.to_response(user, base_path)


@router.delete("/{user_id}", response_model=DeleteResponse)
def delete_user(user_id: UUID, ctx: PersistenceContext = Depends(get_db)):
    """Delete a user. Users that still own meals or breaks are rejected with 409."""
    UserService.delete_user(ctx, user_id)
    return DeleteResponse(deleted=str(user_id))


@router.get("/{user_id}/meals", response_model=List[MealResponse])
def get_user_meals(
    user_id: UUID,
    start: Optional[datetime] = Query(None, description="Consumed at or after"),
    end: Optional[datetime] = Query(None, description="Consumed before"),
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    meals = MealService.list_user_meals(ctx, user_id, start=start, end=end)
    return [MealMapper.to_response(m, base_path) for m in meals]


@router.get("/{user_id}/break-records", response_model=List[BreakRecordResponse])
def get_user_break_records(
    user_id: UUID,
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    records = BreakRecordService.list_user_breaks(ctx, user_id)
    return [BreakRecordMapper.to_response(r, base_path) for r in records]
