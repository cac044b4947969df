"""
Exceptions raised by the task service layer.

The service never builds HTTP responses itself; it raises one of these and
the error handlers registered on the API blueprint decide how each maps to
a status code and body.
"""

from __future__ import annotations

from .constants import DATABASE_WRITE_ERROR, MALFORMED_JSON, TASK_NOT_FOUND


class TaskServiceError(Exception):
    """Base class for all task service failures."""


class TaskValidationError(TaskServiceError):
    """
    A payload broke one or more field rules.

    Attributes:
        field_errors: Mapping of field name to a single human-readable
            violation message.
    """

    def __init__(self, field_errors: dict[str, str]):
        super().__init__(f"Validation failed for fields: {sorted(field_errors)}")
        self.field_errors = dict(field_errors)


class TaskNotFoundError(TaskServiceError):
    """No task exists with the requested id."""

    def __init__(self, task_id: int):
        super().__init__(TASK_NOT_FOUND.format(task_id=task_id))
        self.task_id = task_id


class TaskWriteError(TaskServiceError):
    """The database rejected or failed a write."""

    def __init__(self, cause: BaseException | None = None):
        super().__init__(DATABASE_WRITE_ERROR)
        self.cause = cause


class MalformedRequestError(TaskServiceError):
    """The request body could not be decoded into a task payload."""

    def __init__(self, detail: str | None = None):
        super().__init__(MALFORMED_JSON)
        self.detail = detail
