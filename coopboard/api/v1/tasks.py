from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date

from coopboard.database import get_db
from coopboard.dependencies import get_auth_context
from coopboard.core.context import AuthContext
from coopboard.schemas.task import TaskCreate, TaskResponse
from coopboard.schemas.common import Page, AssignmentResponse, AttendeeSummary
from coopboard.schemas.result import Result
from coopboard.services.task_service import TaskService

router = APIRouter()


@router.get("", response_model=Result[Page[TaskResponse]])
async def list_upcoming_tasks(
    from_date: Optional[date] = Query(None, description="Defaults to today"),
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get upcoming tasks, one page at a time."""
    service = TaskService(db)
    page = service.list_upcoming(ctx, from_date=from_date, offset=offset, limit=limit)
    return Result.successful(data=page)


@router.post("", response_model=Result[TaskResponse], status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Create a task (admin only)."""
    service = TaskService(db)
    task = service.create_task(task_data, ctx)
    return Result.successful(data=task)


@router.get("/{task_id}", response_model=Result[TaskResponse])
async def get_task(
    task_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get task details with its attendees."""
    service = TaskService(db)
    task = service.get(task_id, ctx)
    return Result.successful(data=task)


@router.delete("/{task_id}", response_model=Result[dict])
async def delete_task(
    task_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Delete a task and its sign-ups (admin only)."""
    service = TaskService(db)
    service.delete_task(task_id, ctx)
    return Result.successful(data={"message": "Task deleted successfully"})


@router.post("/{task_id}/signup", response_model=Result[AssignmentResponse], status_code=status.HTTP_201_CREATED)
async def sign_up_for_task(
    task_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Sign the current family up for a task."""
    service = TaskService(db)
    assignment = service.ledger.sign_up(task_id, ctx)
    return Result.successful(data=assignment)


@router.get("/{task_id}/assignments", response_model=Result[AttendeeSummary])
async def get_task_attendees(
    task_id: int,
    max_display: Optional[int] = Query(None, ge=1),
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get the families signed up for a task, optionally truncated."""
    service = TaskService(db)
    summary = service.ledger.list_for_resource(task_id, ctx, max_display=max_display)
    return Result.successful(data=summary)
