from sqlalchemy.orm import Session
from datetime import timedelta
import logging
from coopboard.models.family import Family
from coopboard.repositories.family_repository import FamilyRepository
from coopboard.schemas.family import LoginResponse, FamilyResponse
from coopboard.security import create_access_token, decode_access_token
from coopboard.config import settings
from coopboard.core.exception import ResourceNotFoundException, AuthenticationException

logger = logging.getLogger(__name__)


class AuthService:
    """Service layer for resolving and authenticating families."""

    def __init__(self, db: Session):
        self.db = db
        self.family_repo = FamilyRepository(db)

    @staticmethod
    def normalize_username(username: str) -> str:
        return username.strip().lower()

    def resolve(self, username: str) -> Family:
        """
        Map a human-entered family name to its family record.

        Raises:
            ResourceNotFoundException: If no family has that name
        """
        family = self.family_repo.get_by_username(self.normalize_username(username))
        if family is None:
            raise ResourceNotFoundException("Family")
        return family

    def login(self, username: str) -> LoginResponse:
        """
        Resolve the family and issue an access token for it.
        """
        family = self.resolve(username)

        access_token = create_access_token(
            data={"sub": str(family.id), "username": family.username},
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )
        logger.info("Family %s logged in", family.username)

        return LoginResponse(
            access_token=access_token,
            token_type="bearer",
            family=FamilyResponse.model_validate(family),
        )

    def verify_token(self, token: str) -> Family:
        """
        Verify token and return the family it was issued for.
        """
        payload = decode_access_token(token)
        if payload is None:
            raise AuthenticationException("Could not validate credentials")

        family_id_str: str | None = payload.get("sub")
        if family_id_str is None:
            raise AuthenticationException("Could not validate credentials")

        try:
            family_id = int(family_id_str)
        except (ValueError, TypeError):
            raise AuthenticationException("Invalid token format")

        family = self.family_repo.get(family_id)
        if family is None:
            logger.warning("Token presented for missing family %s", family_id)
            raise AuthenticationException("Family not found")

        return family
