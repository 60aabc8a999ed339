from sqlalchemy.orm import Session
from coopboard.models.cleaning import CleaningSlot, CleaningAssignment
from coopboard.repositories.resource_repository import ResourceRepository


class CleaningSlotRepository(ResourceRepository[CleaningSlot, CleaningAssignment]):
    """Repository for cleaning slots."""

    def __init__(self, db: Session):
        super().__init__(CleaningSlot, CleaningAssignment, "slot_id", db)

    def _ordering(self) -> list:
        return [CleaningSlot.date, CleaningSlot.time, CleaningSlot.id]
