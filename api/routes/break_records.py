"""Break activity routes"""

from fastapi import APIRouter, Depends, Query, status
from uuid import UUID
from typing import List

from api.dependencies import get_db, get_base_path
from api.responses import DeleteResponse, ERROR_RESPONSES
from domain.schemas import BreakRecordCreate, BreakRecordUpdate, BreakRecordResponse
from domain.mappers import BreakRecordMapper
from repositories import PersistenceContext
from services import BreakRecordService

router = APIRouter(
    prefix="/break-records", tags=["Break Records"], responses=ERROR_RESPONSES
)


@router.post(
    "", response_model=BreakRecordResponse, status_code=status.HTTP_201_CREATED
)
def log_break(
    record: BreakRecordCreate,
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    created = BreakRecordService.log_break(ctx, record)
    return BreakRecordMapper.to_response(created, base_path)


@router.get("", response_model=List[BreakRecordResponse])
def get_break_records(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    records = BreakRecordService.list_breaks(ctx, skip=skip, limit=limit)
    return [BreakRecordMapper.to_response(r, base_path) for r in records]


@router.get("/{break_id}", response_model=BreakRecordResponse)
def get_break_record(
    break_id: UUID,
    include_user: bool = Query(False, description="Embed the owning user"),
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    record = BreakRecordService.get_break(ctx, break_id, include_user=include_user)
    return BreakRecordMapper.to_response(record, base_path)


@router.put("/{break_id}", response_model=BreakRecordResponse)
def update_break_record(
    break_id: UUID,
    changes: BreakRecordUpdate,
    ctx: PersistenceContext = Depends(get_db),
    base_path: str = Depends(get_base_path),
):
    record = BreakRecordService.update_break(ctx, break_id, changes)
    return BreakRecordMapper.to_response(record, base_path)


@router.delete("/{break_id}", response_model=DeleteResponse)
def delete_break_record(break_id: UUID, ctx: PersistenceContext = Depends(get_db)):
    BreakRecordService.delete_break(ctx, break_id)
    return DeleteResponse(deleted=str(break_id))
