from sqlalchemy import String, Date, ForeignKey, Integer, Text, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, Optional, TYPE_CHECKING
import datetime
from coopboard.models.base import BaseModel
from coopboard.models.capacity import CapacityMixin
if TYPE_CHECKING:
    from coopboard.models.family import Family


class Task(CapacityMixin, BaseModel):
    """
    A community task families can volunteer for.
    Only admins create or delete tasks.
    """

    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint("max_assignees >= 1", name="ck_tasks_capacity"),
        CheckConstraint("assigned_count <= max_assignees", name="ck_tasks_occupancy"),
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)

    # Capacity
    max_assignees: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    assigned_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    created_by_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("families.id", ondelete="SET NULL"), nullable=True
    )

    # Relationships
    assignments: Mapped[List["TaskAssignment"]] = relationship(
        "TaskAssignment",
        back_populates="task",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )


class TaskAssignment(BaseModel):
    """A family's sign-up for a task"""

    __tablename__ = "task_assignments"
    __table_args__ = (
        UniqueConstraint("task_id", "family_id", name="uq_task_assignment_family"),
    )

    task_id: Mapped[int] = mapped_column(
        ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    family_id: Mapped[int] = mapped_column(
        ForeignKey("families.id", ondelete="CASCADE"), nullable=False, index=True
    )

    task: Mapped["Task"] = relationship("Task", back_populates="assignments")
    family: Mapped["Family"] = relationship("Family", lazy="selectin")

    @property
    def display_name(self) -> str:
        return self.family.display_name
