from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
import datetime as dt


class ContributionCreate(BaseModel):
    """Schema for logging volunteer hours for the current family."""
    hours: Decimal = Field(..., max_digits=6, decimal_places=2)
    activity: str = Field(..., max_length=500)
    date: Optional[dt.date] = Field(None, description="Defaults to today")


class ContributionResponse(BaseModel):
    id: int
    uuid: str
    family_id: int
    family_name: str
    hours: Decimal
    activity: str
    date: dt.date
    created_at: datetime

    class Config:
        from_attributes = True


class FamilyHours(BaseModel):
    family_name: str
    hours: Decimal


class ContributionSummary(BaseModel):
    total_hours: Decimal
    unique_contributors: int
    per_family: List[FamilyHours]
