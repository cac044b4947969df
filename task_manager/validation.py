"""
Field rules applied to task payloads before they reach the database.

Both create and full update run the same rule set. The status-only update
path deliberately skips it.
"""

from __future__ import annotations

from datetime import datetime

from .constants import (
    DESCRIPTION_TOO_LONG,
    DUE_DATE_FUTURE,
    DUE_DATE_REQUIRED,
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
    STATUS_REQUIRED,
    TITLE_REQUIRED,
    TITLE_TOO_LONG,
)
from .models import TaskStatus
from .schemas import TaskRequest


def validate_task_request(request: TaskRequest, now: datetime | None = None) -> dict[str, str]:
    """
    Check a task payload against the field rules.

    Each field reports at most one message, the first rule it breaks;
    different fields report independently.

    Args:
        request: The payload to check.
        now: Reference instant for the future-due-date rule. Defaults to
            the current local time.

    Returns:
        A mapping of field name to violation message. Empty when the
        payload is valid.
    """
    if now is None:
        now = datetime.now()

    errors: dict[str, str] = {}

    if request.title is None or not request.title.strip():
        errors["title"] = TITLE_REQUIRED
    elif len(request.title) > MAX_TITLE_LENGTH:
        errors["title"] = TITLE_TOO_LONG

    if request.description is not None and len(request.description) > MAX_DESCRIPTION_LENGTH:
        errors["description"] = DESCRIPTION_TOO_LONG

    if not isinstance(request.status, TaskStatus):
        errors["status"] = STATUS_REQUIRED

    if request.due_date is None:
        errors["dueDate"] = DUE_DATE_REQUIRED
    elif request.due_date <= now:
        errors["dueDate"] = DUE_DATE_FUTURE

    return errors
