"""
Composable filter predicates for querying tasks.

Each helper returns a SQLAlchemy boolean clause, or ``None`` when its
criterion was not supplied. ``search`` gathers the supplied ones into a
list the repository ANDs together; an empty list leaves the query
unconstrained.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from sqlalchemy import ColumnElement, func

from .models import Task, TaskStatus


def title_contains(term: str | None) -> ColumnElement[bool] | None:
    """Case-insensitive substring match on the title. Blank terms match everything."""
    if term is None or not term.strip():
        return None
    # autoescape keeps '%' and '_' in the term literal
    return func.lower(Task.title).contains(term.lower(), autoescape=True)


def has_status(status: TaskStatus | None) -> ColumnElement[bool] | None:
    """Exact status match."""
    if status is None:
        return None
    return Task.status == status


def due_between(start: datetime, end: datetime) -> ColumnElement[bool]:
    """Due date within the half-open window ``[start, end)``."""
    return (Task.due_date >= start) & (Task.due_date < end)


def due_on(day: date | None) -> ColumnElement[bool] | None:
    """Due date anywhere on the given calendar day, local midnight to midnight."""
    if day is None:
        return None
    start = datetime.combine(day, time.min)
    return due_between(start, start + timedelta(days=1))


def is_overdue(now: datetime) -> ColumnElement[bool]:
    """Due date strictly before ``now``."""
    return Task.due_date < now


def search(
    title: str | None = None,
    status: TaskStatus | None = None,
    due_date: date | None = None,
) -> list[ColumnElement[bool]]:
    """
    Build the predicates for a task search.

    Args:
        title: Optional substring of the title, matched case-insensitively.
        status: Optional exact status.
        due_date: Optional calendar day the task must fall due on.

    Returns:
        The predicates for the criteria that were supplied, to be combined
        with AND.
    """
    clauses = (title_contains(title), has_status(status), due_on(due_date))
    return [clause for clause in clauses if clause is not None]


def parse_search_date(raw: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` query value. Blank or unparseable input yields None."""
    if raw is None or not raw.strip():
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        return None
