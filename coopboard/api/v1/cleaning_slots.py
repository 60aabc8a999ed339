from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from coopboard.database import get_db
from coopboard.dependencies import get_auth_context
from coopboard.core.context import AuthContext
from coopboard.schemas.cleaning import (
    CleaningSlotCreate,
    CleaningSlotResponse,
    DayStatusResponse,
)
from coopboard.schemas.common import Page, AssignmentResponse, AttendeeSummary
from coopboard.schemas.result import Result
from coopboard.services.cleaning_service import CleaningSlotService

router = APIRouter()


@router.get("", response_model=Result[Page[CleaningSlotResponse]])
async def list_upcoming_slots(
    from_date: Optional[date] = Query(None, description="Defaults to today"),
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get upcoming cleaning slots, one page at a time."""
    service = CleaningSlotService(db)
    page = service.list_upcoming(ctx, from_date=from_date, offset=offset, limit=limit)
    return Result.successful(data=page)


@router.post("", response_model=Result[CleaningSlotResponse], status_code=status.HTTP_201_CREATED)
async def create_slot(
    slot_data: CleaningSlotCreate,
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Open a new cleaning slot."""
    service = CleaningSlotService(db)
    slot = service.create_slot(slot_data, ctx)
    return Result.successful(data=slot)


@router.get("/calendar", response_model=Result[List[DayStatusResponse]])
async def get_calendar(
    start: date = Query(...),
    end: date = Query(...),
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get the occupancy colour of every day with slots in a range."""
    service = CleaningSlotService(db)
    statuses = service.calendar(start, end, ctx)
    return Result.successful(
        data=[{"date": day, "status": day_status} for day, day_status in statuses.items()]
    )


@router.get("/day/{day}", response_model=Result[List[CleaningSlotResponse]])
async def get_slots_on_day(
    day: date,
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get all slots on one day."""
    service = CleaningSlotService(db)
    slots = service.list_on_date(day, ctx)
    return Result.successful(data=slots)


@router.get("/{slot_id}", response_model=Result[CleaningSlotResponse])
async def get_slot(
    slot_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get slot details with its attendees."""
    service = CleaningSlotService(db)
    slot = service.get(slot_id, ctx)
    return Result.successful(data=slot)


@router.post("/{slot_id}/signup", response_model=Result[AssignmentResponse], status_code=status.HTTP_201_CREATED)
async def sign_up_for_slot(
    slot_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Sign the current family up for a slot."""
    service = CleaningSlotService(db)
    assignment = service.ledger.sign_up(slot_id, ctx)
    return Result.successful(data=assignment)


@router.get("/{slot_id}/assignments", response_model=Result[AttendeeSummary])
async def get_slot_attendees(
    slot_id: int,
    max_display: Optional[int] = Query(None, ge=1),
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get the families signed up for a slot, optionally truncated."""
    service = CleaningSlotService(db)
    summary = service.ledger.list_for_resource(slot_id, ctx, max_display=max_display)
    return Result.successful(data=summary)
