"""Meal logging routes"""

from fastapi import APIRouter, Depends, Query, status
from uuid import UUID
from typing import List

from api.dependencies import get_db, get_base_path
from api.responses import DeleteResponse, ERROR_RESPONSES
from domain.schemas import MealCreate, MealUpdate, MealResponse
from domain.mappers import MealMapper
from repositories import PersistenceContext
from services import MealService

router = APIRouter(prefix="/meals", tags=["Meals"], responses=ERROR_RESPONSES)


@router.post("", response_model=MealResponse, status_code=status.HTTP_201_CREATED)
def log_meal(
    meal: MealCreate,
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    """Log a meal for an existing user"""
    created = MealService.log_meal(ctx, meal)
    return MealMapper.to_response(created, base_path)


@router.get("", response_model=List[MealResponse])
def get_meals(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    meals = MealService.list_meals(ctx, skip=skip, limit=limit)
    return [MealMapper.to_response(m, base_path) for m in meals]


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(
    meal_id: UUID,
    include_user: bool = Query(False, description="Embed the owning user"),
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    meal = MealService.get_meal(ctx, meal_id, include_user=include_user)
    return MealMapper.to_response(meal, base_path)


@router.put("/{meal_id}", response_model=MealResponse)
def update_meal(
    meal_id: UUID,
    changes: MealUpdate,
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    meal = MealService.update_meal(ctx, meal_id, changes)
    return MealMapper.to_response(meal, base_path)


@router.delete("/{meal_id}", response_model=DeleteResponse)
def delete_meal(meal_id: UUID, ctx: PersistenceContext = Depends(get_db)):
    MealService.delete_meal(ctx, meal_id)
    return DeleteResponse(deleted=str(meal_id))
