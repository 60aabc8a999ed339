from pydantic import BaseModel, Field
from datetime import datetime


class LoginRequest(BaseModel):
    """Schema for logging in with a family name."""
    username: str = Field(..., min_length=1, max_length=50, description="Family login name (case-insensitive)")


class FamilyResponse(BaseModel):
    id: int
    uuid: str
    username: str
    display_name: str
    is_admin: bool
    created_at: datetime

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str


class LoginResponse(Token):
    """Token plus the family record the client keeps for the session."""
    family: FamilyResponse
