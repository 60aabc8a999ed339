from sqlalchemy.orm import Session
from datetime import date, time
from typing import Dict
import logging

from coopboard.config import settings
from coopboard.core.context import AuthContext
from coopboard.core.exception import ValidationException
from coopboard.models.capacity import OccupancyStatus
from coopboard.models.cleaning import CleaningSlot
from coopboard.repositories.cleaning_repository import CleaningSlotRepository
from coopboard.schemas.cleaning import CleaningSlotCreate
from coopboard.services.reporting import day_statuses, occupancy_status
from coopboard.services.resource_pool import ResourcePoolService

logger = logging.getLogger(__name__)

# Longest range the calendar endpoint will colour in one call
MAX_CALENDAR_DAYS = 366


class CleaningSlotService(ResourcePoolService[CleaningSlot]):
    """
    Cleaning calendar.

    Any family may open a slot. Slots cannot be deleted.
    """

    resource_name = "Cleaning slot"

    def __init__(self, db: Session):
        super().__init__(db, CleaningSlotRepository(db))

    def create_slot(self, data: CleaningSlotCreate, ctx: AuthContext) -> CleaningSlot:
        """
        Open a new cleaning slot.

        Raises:
            ValidationException: If the area is blank or unknown, or capacity < 1
        """
        area = self._require_text(data.area, "area")
        if settings.CLEANING_AREAS and area not in settings.CLEANING_AREAS:
            raise ValidationException(
                f"must be one of {', '.join(settings.CLEANING_AREAS)}", field="area"
            )

        max_assignees = data.max_assignees
        if max_assignees is None:
            max_assignees = settings.DEFAULT_CLEANING_CAPACITY
        self._validate_capacity(max_assignees)

        self._apply_context(ctx)
        slot = CleaningSlot(
            date=data.date,
            time=data.time if data.time is not None else time.fromisoformat(settings.DEFAULT_CLEANING_TIME),
            area=area,
            max_assignees=max_assignees,
            assigned_count=0,
            created_by_id=ctx.family_id,
        )
        slot = self.repo.create(slot)

        logger.info("Family %s opened cleaning slot %s (%s, %s)", ctx.username, slot.id, slot.date, area)
        return slot

    def day_status(self, day: date, ctx: AuthContext) -> OccupancyStatus:
        """Colour code for a single calendar day."""
        return occupancy_status(self.list_on_date(day, ctx))

    def calendar(self, start_date: date, end_date: date, ctx: AuthContext) -> Dict[date, OccupancyStatus]:
        """
        Occupancy status of every day in the range that has slots.

        Raises:
            ValidationException: If the range is inverted or too long
        """
        if end_date < start_date:
            raise ValidationException("must not be before start", field="end")
        if (end_date - start_date).days >= MAX_CALENDAR_DAYS:
            raise ValidationException(f"range must be shorter than {MAX_CALENDAR_DAYS} days", field="end")

        self._apply_context(ctx)
        return day_statuses(self.repo.get_by_date_range(start_date, end_date))
