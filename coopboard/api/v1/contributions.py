from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from typing import List

from coopboard.database import get_db
from coopboard.dependencies import get_auth_context
from coopboard.core.context import AuthContext
from coopboard.schemas.contribution import (
    ContributionCreate,
    ContributionResponse,
    ContributionSummary,
)
from coopboard.schemas.result import Result
from coopboard.services.contribution_service import ContributionService

router = APIRouter()


@router.get("", response_model=Result[List[ContributionResponse]])
async def list_contributions(
    mine: bool = Query(False, description="Only the current family's hours"),
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get logged hours, newest first."""
    service = ContributionService(db)
    contributions = service.list_contributions(ctx, mine_only=mine)
    return Result.successful(data=contributions)


@router.post("", response_model=Result[ContributionResponse], status_code=status.HTTP_201_CREATED)
async def add_contribution(
    contribution_data: ContributionCreate,
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Log volunteer hours for the current family."""
    service = ContributionService(db)
    contribution = service.add_contribution(contribution_data, ctx)
    return Result.successful(data=contribution)


@router.get("/summary", response_model=Result[ContributionSummary])
async def get_summary(
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Get total hours, contributor count and per-family totals for the chart."""
    service = ContributionService(db)
    summary = service.get_summary(ctx)
    return Result.successful(data=summary)


@router.delete("/{contribution_id}", response_model=Result[dict])
async def delete_contribution(
    contribution_id: int,
    ctx: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db)
):
    """Delete a contribution (admin only)."""
    service = ContributionService(db)
    service.delete_contribution(contribution_id, ctx)
    return Result.successful(data={"message": "Contribution deleted successfully"})
