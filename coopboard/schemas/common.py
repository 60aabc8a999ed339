from pydantic import BaseModel, Field
from typing import Generic, List, TypeVar
from datetime import datetime

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One offset window of an ordered listing."""
    items: List[T]
    total: int
    offset: int
    limit: int
    has_more: bool


class AssignmentResponse(BaseModel):
    """A sign-up joined with the family display name."""
    id: int
    family_id: int
    display_name: str
    created_at: datetime

    class Config:
        from_attributes = True


class AttendeeSummary(BaseModel):
    """Attendee badges, truncated to a display maximum."""
    attendees: List[AssignmentResponse]
    total: int
    remaining: int
    can_sign_up: bool = Field(False, description="Whether the calling family can still take a seat")
