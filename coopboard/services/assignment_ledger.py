from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Optional
import logging

from coopboard.core.context import AuthContext
from coopboard.core.exception import (
    AlreadyAssignedException,
    CapacityReachedException,
    ResourceNotFoundException,
)
from coopboard.database import apply_session_context
from coopboard.repositories.resource_repository import ResourceRepository
from coopboard.services.reporting import summarize_attendees

logger = logging.getLogger(__name__)


class AssignmentLedger:
    """Records which family holds a seat on which resource."""

    def __init__(self, db: Session, repo: ResourceRepository, resource_name: str):
        self.db = db
        self.repo = repo
        self.resource_name = resource_name

    def sign_up(self, resource_id: int, ctx: AuthContext):
        """
        Give the acting family a seat on a resource.

        The duplicate check runs first so a family already on a full resource
        is told it is already signed up. The seat itself is claimed with a
        conditional update and the unique constraint on (resource, family)
        catches duplicates that race past the check.

        Returns:
            The new assignment; reload the resource to see the new occupancy

        Raises:
            ResourceNotFoundException: If the resource does not exist
            AlreadyAssignedException: If the family already holds a seat
            CapacityReachedException: If no seat is left
        """
        apply_session_context(self.db, ctx.username)

        if not self.repo.exists(resource_id):
            raise ResourceNotFoundException(self.resource_name, resource_id)

        if self.repo.get_assignment(resource_id, ctx.family_id):
            logger.warning(
                "Family %s already signed up for %s %s",
                ctx.username, self.resource_name, resource_id,
            )
            raise AlreadyAssignedException(self.resource_name, resource_id)

        try:
            assignment = self.repo.claim_seat(resource_id, ctx.family_id)
        except IntegrityError:
            logger.warning(
                "Concurrent duplicate sign-up by %s for %s %s",
                ctx.username, self.resource_name, resource_id,
            )
            raise AlreadyAssignedException(self.resource_name, resource_id)

        if assignment is None:
            logger.warning(
                "Family %s refused: %s %s is full",
                ctx.username, self.resource_name, resource_id,
            )
            raise CapacityReachedException(self.resource_name, resource_id)

        logger.info("Family %s signed up for %s %s", ctx.username, self.resource_name, resource_id)
        return assignment

    def list_for_resource(self, resource_id: int, ctx: AuthContext, max_display: Optional[int] = None) -> dict:
        """
        Get the attendees of a resource for badge display.

        Returns:
            Dict matching ``AttendeeSummary``: attendees (at most
            ``max_display``), total, the number left out and whether the
            acting family can still sign up
        """
        apply_session_context(self.db, ctx.username)

        resource = self.repo.get(resource_id)
        if resource is None:
            raise ResourceNotFoundException(self.resource_name, resource_id)

        assignments = self.repo.get_assignments(resource_id)
        shown, remaining = summarize_attendees(assignments, max_display)
        return {
            "attendees": shown,
            "total": len(assignments),
            "remaining": remaining,
            "can_sign_up": resource.can_sign_up(ctx.family_id),
        }
