from coopboard.models.base import Base, BaseModel
from coopboard.models.family import Family
from coopboard.models.capacity import OccupancyStatus
from coopboard.models.cleaning import CleaningSlot, CleaningAssignment
from coopboard.models.task import Task, TaskAssignment
from coopboard.models.contribution import TimeContribution

__all__ = [
    # Base
    "Base",
    "BaseModel",
    # Identity
    "Family",
    # Capacity
    "OccupancyStatus",
    # Cleaning calendar
    "CleaningSlot",
    "CleaningAssignment",
    # Tasks
    "Task",
    "TaskAssignment",
    # Time ledger
    "TimeContribution",
]
