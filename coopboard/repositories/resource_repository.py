from sqlalchemy.orm import Session
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from typing import Generic, List, Optional, Tuple, Type, TypeVar
from datetime import date
from coopboard.models.base import BaseModel
from coopboard.repositories.repository import BaseRepository

R = TypeVar("R", bound=BaseModel)
A = TypeVar("A", bound=BaseModel)


class ResourceRepository(BaseRepository[R], Generic[R, A]):
    """
    Repository for capacity-bounded resources and their assignments.

    Subclasses bind the resource model, its assignment model and the name of
    the assignment column that points back at the resource.
    """

    def __init__(self, model: Type[R], assignment_model: Type[A], resource_key: str, db: Session):
        super().__init__(model, db)
        self.assignment_model = assignment_model
        self.resource_key = resource_key

    @property
    def _resource_column(self):
        return getattr(self.assignment_model, self.resource_key)

    def _ordering(self) -> list:
        return [self.model.date, self.model.id]

    def get_upcoming(self, from_date: date, skip: int = 0, limit: int = 30) -> Tuple[List[R], int]:
        """
        Get one page of resources dated on or after ``from_date``.

        Returns:
            Tuple of (page of resources, exact number of matching rows)
        """
        query = self.db.query(self.model).filter(self.model.date >= from_date)
        total = query.count()
        items = query.order_by(*self._ordering()).offset(skip).limit(limit).all()
        return items, total

    def get_on_date(self, day: date) -> List[R]:
        """Get all resources scheduled on one day."""
        return (
            self.db.query(self.model)
            .filter(self.model.date == day)
            .order_by(*self._ordering())
            .all()
        )

    def get_by_date_range(self, start_date: date, end_date: date) -> List[R]:
        """Get resources within a date range (both ends inclusive)."""
        return (
            self.db.query(self.model)
            .filter(self.model.date >= start_date, self.model.date <= end_date)
            .order_by(*self._ordering())
            .all()
        )

    def get_assignment(self, resource_id: int, family_id: int) -> Optional[A]:
        """Get the assignment binding a family to a resource, if any."""
        return (
            self.db.query(self.assignment_model)
            .filter(
                self._resource_column == resource_id,
                self.assignment_model.family_id == family_id,
            )
            .first()
        )

    def get_assignments(self, resource_id: int) -> List[A]:
        """Get every assignment of a resource, oldest first."""
        return (
            self.db.query(self.assignment_model)
            .filter(self._resource_column == resource_id)
            .order_by(self.assignment_model.created_at, self.assignment_model.id)
            .all()
        )

    def count_assignments(self, resource_id: int) -> int:
        return (
            self.db.query(self.assignment_model)
            .filter(self._resource_column == resource_id)
            .count()
        )

    def claim_seat(self, resource_id: int, family_id: int) -> Optional[A]:
        """
        Take one seat on a resource and record the assignment in one transaction.

        The seat is reserved with a conditional update on the occupancy
        counter, so two concurrent claims for the last seat cannot both win.

        Returns:
            The new assignment, or None if the resource is full

        Raises:
            IntegrityError: If the family already holds an assignment here.
                The transaction, including the reserved seat, is rolled back.
        """
        stmt = (
            update(self.model)
            .where(
                self.model.id == resource_id,
                self.model.assigned_count < self.model.max_assignees,
            )
            .values(assigned_count=self.model.assigned_count + 1)
            .execution_options(synchronize_session=False)
        )
        if self.db.execute(stmt).rowcount != 1:
            self.db.rollback()
            return None

        assignment = self.assignment_model(
            **{self.resource_key: resource_id, "family_id": family_id}
        )
        self.db.add(assignment)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise

        self.db.refresh(assignment)
        return assignment
