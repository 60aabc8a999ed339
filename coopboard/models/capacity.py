"""
Shared behaviour for capacity-bounded resources (cleaning slots and tasks).
Kept as a plain mixin so each resource keeps its own table and columns.
"""
import enum


class OccupancyStatus(str, enum.Enum):
    """How booked a calendar day is"""

    NONE = "none"
    AVAILABLE = "available"
    PARTIAL = "partial"
    FULL = "full"


class CapacityMixin:
    """Expects ``max_assignees``, ``assigned_count`` and ``assignments`` on the model."""

    @property
    def seats_left(self) -> int:
        return max(self.max_assignees - self.assigned_count, 0)

    @property
    def is_full(self) -> bool:
        return self.assigned_count >= self.max_assignees

    def has_family(self, family_id: int) -> bool:
        """Check if a family already holds an assignment here"""
        return any(a.family_id == family_id for a in self.assignments)

    def can_sign_up(self, family_id: int) -> bool:
        return not self.has_family(family_id) and len(self.assignments) < self.max_assignees
