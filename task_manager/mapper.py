"""Translation between API payloads and persisted ``Task`` rows."""

from __future__ import annotations

from .models import Task
from .schemas import TaskRequest, TaskResponse


def to_entity(request: TaskRequest) -> Task:
    """Build an unsaved ``Task`` from a payload. The id is left to the database."""
    return Task(
        title=request.title,
        description=request.description,
        status=request.status,
        due_date=request.due_date,
        tasknum=request.tasknum,
    )


def to_response(task: Task) -> TaskResponse:
    """Copy a ``Task`` row into the response shape, as-is."""
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
        due_date=task.due_date,
        tasknum=task.tasknum,
    )
