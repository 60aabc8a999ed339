import pytest
from datetime import date, timedelta
from sqlalchemy.orm import Session

from coopboard.models.task import Task, TaskAssignment
from coopboard.schemas.task import TaskCreate
from coopboard.services.task_service import TaskService
from coopboard.core.exception import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)


def task_data(**overrides) -> TaskCreate:
    data = {
        "title": "Paint the fence",
        "description": "Bring brushes",
        "date": date.today() + timedelta(days=3),
    }
    data.update(overrides)
    return TaskCreate(**data)


@pytest.mark.unit
class TestTaskCreation:
    """Unit tests for admin-gated task creation."""

    def test_admin_creates_task_with_default_capacity(self, db_session: Session, admin_ctx):
        service = TaskService(db_session)

        task = service.create_task(task_data(), admin_ctx)

        assert task.id is not None
        assert task.title == "Paint the fence"
        assert task.max_assignees == 1
        assert task.assigned_count == 0
        assert task.created_by_id == admin_ctx.family_id

    def test_admin_sets_capacity(self, db_session: Session, admin_ctx):
        task = TaskService(db_session).create_task(task_data(max_assignees=4), admin_ctx)
        assert task.max_assignees == 4

    def test_non_admin_cannot_create(self, db_session: Session, rossi_ctx):
        service = TaskService(db_session)

        with pytest.raises(AuthorizationException):
            service.create_task(task_data(), rossi_ctx)

        assert db_session.query(Task).count() == 0

    def test_blank_title_rejected(self, db_session: Session, admin_ctx):
        with pytest.raises(ValidationException) as exc_info:
            TaskService(db_session).create_task(task_data(title="   "), admin_ctx)

        assert "title" in exc_info.value.detail
        assert db_session.query(Task).count() == 0

    @pytest.mark.parametrize("capacity", [0, -2])
    def test_non_positive_capacity_rejected(self, db_session: Session, admin_ctx, capacity):
        with pytest.raises(ValidationException):
            TaskService(db_session).create_task(task_data(max_assignees=capacity), admin_ctx)

        assert db_session.query(Task).count() == 0

    def test_blank_description_stored_as_none(self, db_session: Session, admin_ctx):
        task = TaskService(db_session).create_task(task_data(description="  "), admin_ctx)
        assert task.description is None


@pytest.mark.unit
class TestTaskDeletion:
    """Unit tests for admin-gated task deletion."""

    def test_admin_deletes_task_and_assignments(self, db_session: Session, admin_ctx, rossi_ctx):
        service = TaskService(db_session)
        task = service.create_task(task_data(max_assignees=2), admin_ctx)
        service.ledger.sign_up(task.id, rossi_ctx)
        task_id = task.id

        assert service.delete_task(task_id, admin_ctx) is True

        assert db_session.query(Task).filter(Task.id == task_id).count() == 0
        assert db_session.query(TaskAssignment).filter(TaskAssignment.task_id == task_id).count() == 0

    def test_non_admin_cannot_delete(self, db_session: Session, admin_ctx, rossi_ctx):
        service = TaskService(db_session)
        task = service.create_task(task_data(), admin_ctx)

        with pytest.raises(AuthorizationException):
            service.delete_task(task.id, rossi_ctx)

        assert db_session.query(Task).count() == 1

    def test_delete_unknown_task(self, db_session: Session, admin_ctx):
        with pytest.raises(ResourceNotFoundException):
            TaskService(db_session).delete_task(12345, admin_ctx)


@pytest.mark.unit
class TestTaskListing:
    """Unit tests for the upcoming-task pages."""

    def test_past_tasks_are_hidden(self, db_session: Session, admin_ctx):
        service = TaskService(db_session)
        service.create_task(task_data(title="Yesterday", date=date.today() - timedelta(days=1)), admin_ctx)
        service.create_task(task_data(title="Today", date=date.today()), admin_ctx)

        page = service.list_upcoming(admin_ctx)

        assert [t.title for t in page["items"]] == ["Today"]
        assert page["total"] == 1
        assert page["has_more"] is False

    def test_ordered_by_date(self, db_session: Session, admin_ctx):
        service = TaskService(db_session)
        today = date.today()
        for offset, title in [(5, "Later"), (1, "Soon"), (3, "Middle")]:
            service.create_task(task_data(title=title, date=today + timedelta(days=offset)), admin_ctx)

        page = service.list_upcoming(admin_ctx)

        assert [t.title for t in page["items"]] == ["Soon", "Middle", "Later"]

    def test_get_unknown_task(self, db_session: Session, rossi_ctx):
        with pytest.raises(ResourceNotFoundException):
            TaskService(db_session).get(42, rossi_ctx)
