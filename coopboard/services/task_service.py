from sqlalchemy.orm import Session
import logging

from coopboard.config import settings
from coopboard.core.context import AuthContext
from coopboard.core.exception import ResourceNotFoundException
from coopboard.models.task import Task
from coopboard.repositories.task_repository import TaskRepository
from coopboard.schemas.task import TaskCreate
from coopboard.services.resource_pool import ResourcePoolService

logger = logging.getLogger(__name__)


class TaskService(ResourcePoolService[Task]):
    """
    Community tasks.

    Only admins create or delete tasks; any family may sign up.
    """

    resource_name = "Task"

    def __init__(self, db: Session):
        super().__init__(db, TaskRepository(db))

    def create_task(self, data: TaskCreate, ctx: AuthContext) -> Task:
        """
        Create a task (admin only).

        Raises:
            AuthorizationException: If the acting family is not an admin
            ValidationException: If the title is blank or capacity < 1
        """
        self._require_admin(ctx, "create tasks")

        title = self._require_text(data.title, "title")
        max_assignees = data.max_assignees
        if max_assignees is None:
            max_assignees = settings.DEFAULT_TASK_CAPACITY
        self._validate_capacity(max_assignees)

        self._apply_context(ctx)
        task = Task(
            title=title,
            description=(data.description or "").strip() or None,
            date=data.date,
            max_assignees=max_assignees,
            assigned_count=0,
            created_by_id=ctx.family_id,
        )
        task = self.repo.create(task)

        logger.info("Admin %s created task %s (%s)", ctx.username, task.id, task.title)
        return task

    def delete_task(self, task_id: int, ctx: AuthContext) -> bool:
        """
        Delete a task and, by cascade, its assignments (admin only).

        Raises:
            AuthorizationException: If the acting family is not an admin
            ResourceNotFoundException: If the task does not exist
        """
        self._require_admin(ctx, "delete tasks")

        self._apply_context(ctx)
        if not self.repo.delete(task_id):
            raise ResourceNotFoundException(self.resource_name, task_id)

        logger.info("Admin %s deleted task %s", ctx.username, task_id)
        return True
