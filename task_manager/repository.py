"""
Data access for tasks.

``TaskRepository`` wraps an injected SQLAlchemy session so the service
layer can be exercised against any session (the Flask-SQLAlchemy scoped
session in the app, or a stand-in in unit tests).
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from flask_sqlalchemy.pagination import Pagination
from sqlalchemy import ColumnElement, select
from sqlalchemy.orm import Session

from . import db
from .models import Task, TaskStatus
from .specifications import has_status, is_overdue


class TaskRepository:
    """Persistence operations for ``Task`` rows."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, task_id: int) -> Task | None:
        return self.session.get(Task, task_id)

    def find_all(self) -> Sequence[Task]:
        return self.session.scalars(select(Task)).all()

    def find_by_status(self, status: TaskStatus) -> Sequence[Task]:
        return self.session.scalars(select(Task).where(has_status(status))).all()

    def find_by_due_date_before(self, cutoff: datetime) -> Sequence[Task]:
        return self.session.scalars(select(Task).where(is_overdue(cutoff))).all()

    def find_all_matching(self, *predicates: ColumnElement[bool]) -> Sequence[Task]:
        """Return tasks satisfying every predicate; no predicates returns all tasks."""
        stmt = select(Task)
        if predicates:
            stmt = stmt.where(*predicates)
        return self.session.scalars(stmt).all()

    def find_page(self, page: int = 1, per_page: int = 20) -> Pagination:
        """
        Return one page of tasks ordered by id.

        Uses Flask-SQLAlchemy pagination, so it needs an active application
        context. No route calls this yet.
        """
        return db.paginate(
            select(Task).order_by(Task.id),
            page=page,
            per_page=per_page,
            error_out=False,
        )

    def save(self, task: Task) -> Task:
        """Add (or re-add) ``task`` and commit."""
        self.session.add(task)
        self.session.commit()
        return task

    def delete(self, task: Task) -> None:
        self.session.delete(task)
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
