from sqlalchemy import String, Date, Time, ForeignKey, Integer, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, Optional, TYPE_CHECKING
import datetime
from coopboard.models.base import BaseModel
from coopboard.models.capacity import CapacityMixin
if TYPE_CHECKING:
    from coopboard.models.family import Family


class CleaningSlot(CapacityMixin, BaseModel):
    """
    A cleaning shift in one area of the school.
    Any family may open a slot; slots are never deleted.
    """

    __tablename__ = "cleaning_slots"
    __table_args__ = (
        CheckConstraint("max_assignees >= 1", name="ck_cleaning_slots_capacity"),
        CheckConstraint("assigned_count <= max_assignees", name="ck_cleaning_slots_occupancy"),
    )

    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    time: Mapped[datetime.time] = mapped_column(Time, nullable=False)
    area: Mapped[str] = mapped_column(String(100), nullable=False)

    # Capacity
    max_assignees: Mapped[int] = mapped_column(Integer, default=2, nullable=False)
    assigned_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    created_by_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("families.id", ondelete="SET NULL"), nullable=True
    )

    # Relationships
    assignments: Mapped[List["CleaningAssignment"]] = relationship(
        "CleaningAssignment",
        back_populates="slot",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )


class CleaningAssignment(BaseModel):
    """A family's sign-up for a cleaning slot"""

    __tablename__ = "cleaning_assignments"
    __table_args__ = (
        UniqueConstraint("slot_id", "family_id", name="uq_cleaning_assignment_family"),
    )

    slot_id: Mapped[int] = mapped_column(
        ForeignKey("cleaning_slots.id", ondelete="CASCADE"), nullable=False, index=True
    )
    family_id: Mapped[int] = mapped_column(
        ForeignKey("families.id", ondelete="CASCADE"), nullable=False, index=True
    )

    slot: Mapped["CleaningSlot"] = relationship("CleaningSlot", back_populates="assignments")
    family: Mapped["Family"] = relationship("Family", lazy="selectin")

    @property
    def display_name(self) -> str:
        return self.family.display_name
