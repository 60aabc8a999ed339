from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from ...schemas.family import LoginRequest, LoginResponse, FamilyResponse
from ...schemas.result import Result
from ...services.auth_service import AuthService
from ...dependencies import get_current_family
from coopboard.models.family import Family

router = APIRouter()


@router.post("/login", response_model=Result[LoginResponse])
async def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Log in with the family name.

    - **username**: family login name, case-insensitive

    Returns:
        Result[LoginResponse]: access token and the family record to keep
        for the session
    """
    auth_service = AuthService(db)
    response = auth_service.login(credentials.username)
    return Result.successful(data=response)


@router.get("/me", response_model=Result[FamilyResponse])
async def get_current_family_profile(current_family: Family = Depends(get_current_family)):
    """
    Get the authenticated family. Clients use this to restore a stored session.
    """
    return Result.successful(data=current_family)


@router.post("/logout", response_model=Result[dict])
async def logout(current_family: Family = Depends(get_current_family)):
    """
    Logout.

    Client should delete the token and stored family from storage.
    """
    return Result.successful(data={"message": "Successfully logged out"})
