from sqlalchemy.orm import Session
from typing import Generic, List, Optional, TypeVar
from datetime import date
import logging

from coopboard.config import settings
from coopboard.core.context import AuthContext
from coopboard.core.exception import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from coopboard.database import apply_session_context
from coopboard.repositories.resource_repository import ResourceRepository
from coopboard.services.assignment_ledger import AssignmentLedger

logger = logging.getLogger(__name__)

R = TypeVar("R")


class ResourcePoolService(Generic[R]):
    """
    Lifecycle of capacity-bounded resources.

    Concrete services decide who may create or delete; everything shared
    (paging, lookups, sign-up eligibility) lives here. Sign-ups themselves go
    through ``self.ledger``.
    """

    resource_name = "Resource"

    def __init__(self, db: Session, repo: ResourceRepository):
        self.db = db
        self.repo = repo
        self.ledger = AssignmentLedger(db, repo, self.resource_name)

    def _apply_context(self, ctx: AuthContext) -> None:
        apply_session_context(self.db, ctx.username)

    def _require_admin(self, ctx: AuthContext, action: str) -> None:
        if not ctx.is_admin:
            logger.warning("Family %s refused: %s requires admin", ctx.username, action)
            raise AuthorizationException(message=f"Only admins can {action}")

    @staticmethod
    def _require_text(value: Optional[str], field: str) -> str:
        if value is None or not value.strip():
            raise ValidationException("must not be blank", field=field)
        return value.strip()

    @staticmethod
    def _validate_capacity(max_assignees: int) -> int:
        if max_assignees < 1:
            raise ValidationException("must be at least 1", field="max_assignees")
        return max_assignees

    def get(self, resource_id: int, ctx: AuthContext) -> R:
        """
        Get one resource with its assignments.

        Raises:
            ResourceNotFoundException: If the resource does not exist
        """
        self._apply_context(ctx)
        resource = self.repo.get(resource_id)
        if not resource:
            raise ResourceNotFoundException(self.resource_name, resource_id)
        return resource

    def list_upcoming(
        self,
        ctx: AuthContext,
        from_date: Optional[date] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> dict:
        """
        Get one page of resources dated on or after ``from_date`` (today by default).

        Each call is independent; callers page by increasing ``offset``.

        Returns:
            Dict matching ``Page``: items, total, offset, limit, has_more
        """
        if offset < 0:
            raise ValidationException("must not be negative", field="offset")
        if limit is None:
            limit = settings.UPCOMING_PAGE_SIZE
        if limit < 1 or limit > settings.MAX_PAGE_SIZE:
            raise ValidationException(
                f"must be between 1 and {settings.MAX_PAGE_SIZE}", field="limit"
            )

        self._apply_context(ctx)
        items, total = self.repo.get_upcoming(from_date or date.today(), skip=offset, limit=limit)

        return {
            "items": items,
            "total": total,
            "offset": offset,
            "limit": limit,
            "has_more": offset + len(items) < total,
        }

    def list_on_date(self, day: date, ctx: AuthContext) -> List[R]:
        """Get every resource scheduled on one day."""
        self._apply_context(ctx)
        return self.repo.get_on_date(day)

    @staticmethod
    def can_sign_up(resource, ctx: AuthContext) -> bool:
        """True if the family holds no seat here and a seat is free."""
        return resource.can_sign_up(ctx.family_id)
