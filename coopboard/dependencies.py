from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from .database import get_db
from .models.family import Family
from .config import settings
from .core.context import AuthContext
from .services.auth_service import AuthService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login")


async def get_current_family(
    token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)
) -> Family:
    """
    Dependency to get the authenticated family from the bearer token.
    Raises CustomException instead of HTTPException for consistent error handling.
    """
    return AuthService(db).verify_token(token)


async def get_auth_context(
    family: Family = Depends(get_current_family),
) -> AuthContext:
    """
    Dependency for routes that act on behalf of a family.

    Example:
        @router.post("/things")
        async def create(ctx: AuthContext = Depends(get_auth_context)):
            ...
    """
    return AuthContext.from_family(family)
