"""Small time helpers shared by the test modules and fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta


def future(**delta: float) -> datetime:
    """Return a naive local timestamp ``delta`` after now (defaults to one week)."""
    return datetime.now() + timedelta(**(delta or {"days": 7}))


def past(**delta: float) -> datetime:
    """Return a naive local timestamp ``delta`` before now (defaults to one day)."""
    return datetime.now() - timedelta(**(delta or {"days": 1}))
