from sqlalchemy.orm import Session
from coopboard.models.task import Task, TaskAssignment
from coopboard.repositories.resource_repository import ResourceRepository


class TaskRepository(ResourceRepository[Task, TaskAssignment]):
    """Repository for community tasks."""

    def __init__(self, db: Session):
        super().__init__(Task, TaskAssignment, "task_id", db)
