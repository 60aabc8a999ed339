from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
import datetime as dt

from coopboard.models.capacity import OccupancyStatus
from coopboard.schemas.common import AssignmentResponse


class CleaningSlotCreate(BaseModel):
    """
    Schema for opening a cleaning slot.
    Time and capacity fall back to the configured defaults.
    """
    date: dt.date
    area: str = Field(..., max_length=100)
    time: Optional[dt.time] = Field(None, description="Start time, defaults to the usual cleaning time")
    max_assignees: Optional[int] = Field(None, description="Number of families needed")


class CleaningSlotResponse(BaseModel):
    id: int
    uuid: str
    date: dt.date
    time: dt.time
    area: str
    max_assignees: int
    assigned_count: int
    seats_left: int
    is_full: bool
    created_by_id: Optional[int]
    created_at: datetime
    assignments: List[AssignmentResponse] = []

    class Config:
        from_attributes = True


class DayStatusResponse(BaseModel):
    """Calendar colour coding for one day."""
    date: dt.date
    status: OccupancyStatus
