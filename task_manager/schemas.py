"""
Request and response shapes for the task API.

``TaskRequest`` is the typed form of a decoded JSON body, and
``TaskResponse`` is what the API hands back to clients. Both use the
external camel-case keys (``dueDate``, ``tasknum``) on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .constants import MAX_TASKNUM, MIN_TASKNUM
from .exceptions import MalformedRequestError
from .models import TaskStatus


def parse_due_date(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into a naive local datetime.

    A trailing ``Z`` is accepted. Values carrying an offset are converted to
    local time before the offset is dropped, so everything stored and
    compared is on the same local clock.

    Raises:
        ValueError: If ``value`` is not an ISO-8601 timestamp.
        OverflowError: If converting the offset to local time leaves the
            representable range (e.g. ``9999-12-31T23:59:59-14:00``).
    """
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise MalformedRequestError(f"'{key}' must be a string")


@dataclass
class TaskRequest:
    """Client-supplied fields for creating or replacing a task."""

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    due_date: datetime | None = None
    tasknum: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> TaskRequest:
        """
        Build a request from a decoded JSON body.

        Unknown status names become ``None`` and are reported later by
        validation. Structural problems (a non-object body, wrongly typed
        fields, an unparseable ``dueDate``, an out-of-range ``tasknum``)
        raise ``MalformedRequestError``.
        """
        if not isinstance(data, dict):
            raise MalformedRequestError("request body must be a JSON object")

        raw_due = _optional_str(data, "dueDate")
        due_date = None
        if raw_due is not None and raw_due.strip():
            try:
                due_date = parse_due_date(raw_due)
            except (ValueError, OverflowError) as exc:
                raise MalformedRequestError(f"unparseable dueDate {raw_due!r}") from exc

        tasknum = data.get("tasknum")
        # bool is an int subclass but never a valid task number
        if tasknum is not None and (isinstance(tasknum, bool) or not isinstance(tasknum, int)):
            raise MalformedRequestError("'tasknum' must be an integer")
        if tasknum is not None and not MIN_TASKNUM <= tasknum <= MAX_TASKNUM:
            raise MalformedRequestError(f"'tasknum' {tasknum} is out of range")

        return cls(
            title=_optional_str(data, "title"),
            description=_optional_str(data, "description"),
            status=TaskStatus.parse(data.get("status")),
            due_date=due_date,
            tasknum=tasknum,
        )


@dataclass
class TaskResponse:
    """Task representation returned to API consumers."""

    id: int | None
    title: str | None
    description: str | None
    status: TaskStatus | None
    due_date: datetime | None
    tasknum: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON shape ``{id, title, description, status, dueDate, tasknum}``."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value if isinstance(self.status, TaskStatus) else self.status,
            "dueDate": self.due_date.isoformat() if self.due_date is not None else None,
            "tasknum": self.tasknum,
        }
