import logging
import uuid
from datetime import date, datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from app.core.errors import NotFoundError, StoreError, ValidationError
from app.db.models.base import as_utc, utcnow
from app.db.models.tasks import TaskPriority, TaskStatus
from app.db.repositories.tasks import TaskRepository
from app.features.categories.schemas import CategoryCreateIn
from app.features.tasks.schemas import TaskCreateIn, TaskUpdateIn
from app.features.tasks.services import TaskService


@pytest.fixture()
def work(category_service):
    return category_service.create(CategoryCreateIn(name="Work", color="#3b82f6"))


@pytest.mark.parametrize("title", ["", "  "])
def test_create_with_blank_title_never_reaches_store(title):
    repo = MagicMock(spec=TaskRepository)
    with pytest.raises(ValidationError) as exc_info:
        TaskService(repo).create(TaskCreateIn(title=title))

    assert exc_info.value.errors == {"title": "Title is required"}
    repo.create.assert_not_called()


def test_work_scenario(category_service, task_service, work):
    assert isinstance(work.id, uuid.UUID)
    assert work.created_at is not None
    assert work.description is None

    task = task_service.create(TaskCreateIn(title="Write report", category_id=work.id))
    assert task.status == TaskStatus.TODO
    assert task.priority == TaskPriority.MEDIUM
    assert task.due_date is None
    assert task.category_id == work.id
    assert task.updated_at >= task.created_at
    created_at = task.created_at

    done = task_service.update_status(task.id, TaskStatus.COMPLETED)
    assert done.status == TaskStatus.COMPLETED
    assert done.updated_at > created_at


def test_create_normalizes_empty_optional_strings(task_service):
    task = task_service.create(
        TaskCreateIn(title="  Call bank  ", description="  ", due_date="", category_id="")
    )
    assert task.title == "Call bank"
    assert task.description is None
    assert task.due_date is None
    assert task.category_id is None


def test_round_trip_in_joined_listing(task_service, work):
    created = task_service.create(
        TaskCreateIn(
            title="Plan trip",
            description="flights + hotel",
            status="in_progress",
            priority="high",
            category_id=str(work.id),
            due_date="2025-03-01",
        )
    )

    listed = task_service.list_all()
    assert [t.id for t in listed] == [created.id]
    row = listed[0]
    assert row.title == "Plan trip"
    assert row.description == "flights + hotel"
    assert row.status == TaskStatus.IN_PROGRESS
    assert row.priority == TaskPriority.HIGH
    assert row.due_date == date(2025, 3, 1)
    assert row.category is not None
    assert row.category.name == "Work"


def test_update_status_leaves_other_fields_untouched(task_service, work):
    task = task_service.create(
        TaskCreateIn(title="Write report", priority="high", category_id=work.id, due_date="2025-01-31")
    )
    before = task_service.get(task.id)

    task_service.update_status(task.id, TaskStatus.IN_PROGRESS)
    after = task_service.get(task.id)

    assert after.status == TaskStatus.IN_PROGRESS
    assert after.updated_at > before.updated_at
    for field in ("title", "description", "priority", "category_id", "due_date", "created_at"):
        assert getattr(after, field) == getattr(before, field)


def test_update_always_stamps_updated_at(task_service):
    task = task_service.create(TaskCreateIn(title="A"))
    first = task.updated_at

    # update() renvoie toujours la même instance ORM : on copie les valeurs au fur et à mesure
    second = task_service.update(task.id, TaskUpdateIn()).updated_at
    assert second > first

    third = task_service.update(task.id, TaskUpdateIn(title="B"))
    assert third.updated_at > second
    assert third.title == "B"


def test_timestamps_are_utc_and_ordered(task_service):
    assert utcnow().tzinfo is not None

    task = task_service.create(TaskCreateIn(title="A"))
    created_at = as_utc(task.created_at)
    assert created_at.utcoffset() == timedelta(0)
    assert as_utc(task.updated_at) >= created_at

    updated = task_service.update_status(task.id, TaskStatus.COMPLETED)
    assert as_utc(updated.updated_at) > created_at
    assert as_utc(updated.created_at) == created_at


def test_as_utc_accepts_naive_and_aware_values():
    naive = datetime(2025, 1, 31, 12, 0)
    paris = timezone(timedelta(hours=1))
    assert as_utc(naive) == datetime(2025, 1, 31, 12, 0, tzinfo=timezone.utc)
    assert as_utc(datetime(2025, 1, 31, 13, 0, tzinfo=paris)) == datetime(2025, 1, 31, 12, 0, tzinfo=timezone.utc)


def test_blank_title_is_logged_as_warning(task_service, caplog):
    with caplog.at_level(logging.WARNING, logger="app.features.tasks.services"):
        with pytest.raises(ValidationError):
            task_service.create(TaskCreateIn(title="  "))

    assert any(
        r.levelno == logging.WARNING and "Title is required" in r.getMessage()
        for r in caplog.records
    )


def test_update_ignores_null_status_and_rejects_blank_title(task_service):
    task = task_service.create(TaskCreateIn(title="A", status="completed"))

    updated = task_service.update(task.id, TaskUpdateIn(status=None, description="notes"))
    assert updated.status == TaskStatus.COMPLETED
    assert updated.description == "notes"

    with pytest.raises(ValidationError):
        task_service.update(task.id, TaskUpdateIn(title=""))


def test_list_by_status_and_by_category(task_service, work):
    a = task_service.create(TaskCreateIn(title="a", category_id=work.id))
    b = task_service.create(TaskCreateIn(title="b", status="completed"))
    c = task_service.create(TaskCreateIn(title="c", category_id=work.id, status="completed"))

    assert [t.id for t in task_service.list_all()] == [c.id, b.id, a.id]
    assert [t.id for t in task_service.list_by_status(TaskStatus.COMPLETED)] == [c.id, b.id]
    assert [t.id for t in task_service.list_by_category(work.id)] == [c.id, a.id]


def test_unknown_category_is_rejected_by_store(task_service):
    with pytest.raises(StoreError) as exc_info:
        task_service.create(TaskCreateIn(title="orphan", category_id=uuid.uuid4()))
    assert exc_info.value.kind == "store"
    assert exc_info.value.status_code == 409


def test_deleting_category_keeps_tasks_without_category(category_service, task_service, work):
    work_id = work.id
    task = task_service.create(TaskCreateIn(title="Write report", category_id=work_id))
    task_id = task.id

    category_service.delete(work_id)

    listed = task_service.list_all()
    assert [t.id for t in listed] == [task_id]
    assert listed[0].category is None
    assert listed[0].category_id is None
    assert task_service.list_by_category(work_id) == []


def test_get_and_delete(task_service):
    task_id = task_service.create(TaskCreateIn(title="Temp")).id
    assert task_service.get(task_id).title == "Temp"

    task_service.delete(task_id)

    with pytest.raises(NotFoundError):
        task_service.get(task_id)
    with pytest.raises(NotFoundError):
        task_service.delete(task_id)
    with pytest.raises(NotFoundError):
        task_service.update_status(task_id, TaskStatus.COMPLETED)
