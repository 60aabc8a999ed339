from sqlalchemy.orm import Session
from datetime import date
from typing import List
import logging

from coopboard.core.context import AuthContext
from coopboard.core.exception import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from coopboard.database import apply_session_context
from coopboard.models.contribution import TimeContribution
from coopboard.repositories.contribution_repository import ContributionRepository
from coopboard.schemas.contribution import ContributionCreate
from coopboard.services import reporting

logger = logging.getLogger(__name__)


class ContributionService:
    """Service layer for the volunteer-hours ledger."""

    def __init__(self, db: Session):
        self.db = db
        self.contribution_repo = ContributionRepository(db)

    def add_contribution(self, data: ContributionCreate, ctx: AuthContext) -> TimeContribution:
        """
        Log hours for the acting family.

        Raises:
            ValidationException: If hours are negative or the activity is blank
        """
        if data.hours < 0:
            raise ValidationException("must not be negative", field="hours")
        if not data.activity or not data.activity.strip():
            raise ValidationException("must not be blank", field="activity")

        apply_session_context(self.db, ctx.username)
        contribution = TimeContribution(
            family_id=ctx.family_id,
            hours=data.hours,
            activity=data.activity.strip(),
            date=data.date or date.today(),
        )
        contribution = self.contribution_repo.create(contribution)

        logger.info("Family %s logged %s hours", ctx.username, data.hours)
        return contribution

    def list_contributions(self, ctx: AuthContext, mine_only: bool = False) -> List[TimeContribution]:
        """Get all contributions (or the acting family's), newest first."""
        apply_session_context(self.db, ctx.username)
        if mine_only:
            return self.contribution_repo.get_by_family(ctx.family_id)
        return self.contribution_repo.get_all_recent_first()

    def delete_contribution(self, contribution_id: int, ctx: AuthContext) -> bool:
        """
        Delete a contribution (admin only).

        Raises:
            AuthorizationException: If the acting family is not an admin
            ResourceNotFoundException: If the contribution does not exist
        """
        if not ctx.is_admin:
            logger.warning("Family %s refused: deleting contributions requires admin", ctx.username)
            raise AuthorizationException(message="Only admins can delete contributions")

        apply_session_context(self.db, ctx.username)
        if not self.contribution_repo.delete(contribution_id):
            raise ResourceNotFoundException("Contribution", contribution_id)

        logger.info("Admin %s deleted contribution %s", ctx.username, contribution_id)
        return True

    def get_summary(self, ctx: AuthContext) -> dict:
        """
        Totals over every loaded contribution.

        Returns:
            Dict matching ``ContributionSummary``
        """
        contributions = self.list_contributions(ctx)
        per_family = reporting.per_family_totals(contributions)
        return {
            "total_hours": reporting.total_hours(contributions),
            "unique_contributors": reporting.unique_contributor_count(contributions),
            "per_family": [
                {"family_name": name, "hours": hours} for name, hours in per_family.items()
            ],
        }
