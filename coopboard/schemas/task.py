from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
import datetime as dt

from coopboard.schemas.common import AssignmentResponse


class TaskCreate(BaseModel):
    """Schema for creating a task (admin only)."""
    title: str = Field(..., max_length=200)
    description: Optional[str] = None
    date: dt.date
    max_assignees: Optional[int] = Field(None, description="Maximum number of families, at least 1")


class TaskResponse(BaseModel):
    id: int
    uuid: str
    title: str
    description: Optional[str]
    date: dt.date
    max_assignees: int
    assigned_count: int
    seats_left: int
    is_full: bool
    created_by_id: Optional[int]
    created_at: datetime
    assignments: List[AssignmentResponse] = []

    class Config:
        from_attributes = True
