"""
Business operations on tasks.

``TaskService`` is the only place business rules live: it validates
payloads, maps them onto rows, calls the repository and translates
database failures into ``TaskWriteError``. It knows nothing about HTTP.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date, datetime

from sqlalchemy.exc import SQLAlchemyError

from . import specifications
from .exceptions import TaskNotFoundError, TaskValidationError, TaskWriteError
from .mapper import to_entity, to_response
from .models import Task, TaskStatus
from .repository import TaskRepository
from .schemas import TaskRequest, TaskResponse
from .validation import validate_task_request

logger = logging.getLogger(__name__)


def _responses(tasks: Iterable[Task]) -> list[TaskResponse]:
    return [to_response(task) for task in tasks]


class TaskService:
    """
    Orchestrates validation, mapping and persistence for tasks.

    Args:
        repository: Store handle used for every read and write.
        clock: Returns the current local time. Used as the reference
            instant for the future-due-date rule.
    """

    def __init__(self, repository: TaskRepository, clock: Callable[[], datetime] = datetime.now):
        self.repository = repository
        self.clock = clock

    def _find_or_raise(self, task_id: int) -> Task:
        task = self.repository.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def _validate(self, request: TaskRequest) -> None:
        errors = validate_task_request(request, now=self.clock())
        if errors:
            raise TaskValidationError(errors)

    def _save(self, task: Task, action: str) -> Task:
        try:
            return self.repository.save(task)
        except SQLAlchemyError as exc:
            self.repository.rollback()
            logger.error("Database write failure while %s task: %s", action, exc, exc_info=True)
            raise TaskWriteError(exc) from exc

    def create(self, request: TaskRequest) -> TaskResponse:
        self._validate(request)
        task = self._save(to_entity(request), "creating")
        logger.info("Created task with ID: %s", task.id)
        return to_response(task)

    def get_by_id(self, task_id: int) -> TaskResponse:
        return to_response(self._find_or_raise(task_id))

    def update(self, task_id: int, request: TaskRequest) -> TaskResponse:
        """
        Replace title, description, status and due date of an existing task.

        The id and ``tasknum`` are left as they were.
        """
        task = self._find_or_raise(task_id)
        self._validate(request)

        task.title = request.title
        task.description = request.description
        task.status = request.status
        task.due_date = request.due_date

        self._save(task, "updating")
        logger.info("Updated task %s", task_id)
        return to_response(task)

    def update_status(self, task_id: int, status: TaskStatus) -> TaskResponse:
        """
        Set only the status of a task.

        Skips payload validation on purpose, so a task whose due date has
        already passed can still be moved to another status.
        """
        task = self._find_or_raise(task_id)
        task.status = status
        self._save(task, "updating status of")
        logger.info("Updated task %s status to %s", task_id, status.value)
        return to_response(task)

    def delete(self, task_id: int) -> None:
        task = self._find_or_raise(task_id)
        try:
            self.repository.delete(task)
        except SQLAlchemyError as exc:
            self.repository.rollback()
            logger.error("Database write failure while deleting task: %s", exc, exc_info=True)
            raise TaskWriteError(exc) from exc
        logger.info("Deleted task %s", task_id)

    def list_all(self) -> list[TaskResponse]:
        return _responses(self.repository.find_all())

    def list_by_status(self, status: TaskStatus) -> list[TaskResponse]:
        return _responses(self.repository.find_by_status(status))

    def list_overdue(self, as_of: datetime) -> list[TaskResponse]:
        """Tasks whose due date is strictly before ``as_of``."""
        return _responses(self.repository.find_by_due_date_before(as_of))

    def search(
        self,
        title: str | None = None,
        status: TaskStatus | None = None,
        due_date: date | None = None,
    ) -> list[TaskResponse]:
        predicates = specifications.search(title=title, status=status, due_date=due_date)
        return _responses(self.repository.find_all_matching(*predicates))
