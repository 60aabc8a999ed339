from sqlalchemy.orm import Session
from typing import Optional
from coopboard.models.family import Family
from coopboard.repositories.repository import BaseRepository


class FamilyRepository(BaseRepository[Family]):
    """Repository for Family operations."""

    def __init__(self, db: Session):
        super().__init__(Family, db)

    def get_by_username(self, username: str) -> Optional[Family]:
        """Get family by its login handle (stored lower-case)."""
        return self.db.query(Family).filter(Family.username == username).first()

    def username_exists(self, username: str) -> bool:
        """Check if username already exists."""
        return self.db.query(Family).filter(Family.username == username).count() > 0
