"""
Database models for the Task Manager application.

This module defines the SQLAlchemy model representing a task and the
enumeration of statuses it may carry. Status transitions are not
constrained: any value may follow any other.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from . import db
from .constants import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH


class TaskStatus(str, Enum):
    """
    Enumeration of task lifecycle statuses.

    Inherits from ``str`` so members serialise directly to their names in
    JSON responses and compare equal to the raw strings stored in the
    ``status`` column.
    """

    NEW = "NEW"
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    APPROVED = "APPROVED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, value: object) -> TaskStatus | None:
        """Return the member named ``value``, or None when it is not one."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls[value]
        except KeyError:
            return None


class Task(db.Model):
    """
    Task model representing a single work item.

    Attributes:
        id: Auto-incrementing primary key, never reused after a delete.
        title: Short title describing the task.
        description: Optional longer text.
        status: Current status, stored as the enum name in a VARCHAR column.
        due_date: Deadline as a naive local timestamp.
        tasknum: Optional secondary number carried through untouched.
    """

    __tablename__ = "task"
    # AUTOINCREMENT stops SQLite from handing out the id of a deleted row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: int = db.Column(db.Integer, primary_key=True)
    title: str = db.Column(db.String(MAX_TITLE_LENGTH), nullable=False)
    description: str | None = db.Column(db.String(MAX_DESCRIPTION_LENGTH), nullable=True)
    status: TaskStatus = db.Column(
        db.Enum(TaskStatus, native_enum=False, length=20, validate_strings=True),
        nullable=False,
    )
    due_date: datetime = db.Column("duedate", db.DateTime, nullable=False)
    tasknum: int | None = db.Column(db.Integer, nullable=True)

    def __repr__(self) -> str:
        """Return string representation of the task."""
        return f"<Task {self.id}: {self.title}>"
