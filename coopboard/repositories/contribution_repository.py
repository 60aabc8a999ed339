from sqlalchemy.orm import Session
from typing import List
from coopboard.models.contribution import TimeContribution
from coopboard.repositories.repository import BaseRepository


class ContributionRepository(BaseRepository[TimeContribution]):
    """Repository for logged volunteer hours."""

    def __init__(self, db: Session):
        super().__init__(TimeContribution, db)

    def get_all_recent_first(self) -> List[TimeContribution]:
        """Get every contribution, newest first."""
        return (
            self.db.query(TimeContribution)
            .order_by(TimeContribution.created_at.desc(), TimeContribution.id.desc())
            .all()
        )

    def get_by_family(self, family_id: int) -> List[TimeContribution]:
        """Get the contributions logged by one family, newest first."""
        return (
            self.db.query(TimeContribution)
            .filter(TimeContribution.family_id == family_id)
            .order_by(TimeContribution.created_at.desc(), TimeContribution.id.desc())
            .all()
        )
