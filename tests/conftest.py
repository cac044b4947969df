"""
Shared pytest fixtures for the Task Manager test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing fresh data for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Database setup/teardown
- Test client creation
"""

from __future__ import annotations

import os
from datetime import datetime
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from task_manager import create_app, db
from task_manager.models import Task, TaskStatus
from task_manager.repository import TaskRepository
from tests.helpers import future, past


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    The 'session' scope means the same app instance is reused
    for all tests; each test still gets empty tables via ``db_session``.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(app):
    """
    Create a fresh database for each test.

    This fixture ensures test isolation by:
    1. Creating all tables before the test
    2. Providing the database handle
    3. Rolling back and dropping all tables after the test

    Args:
        app: Flask application fixture.

    Yields:
        Flask-SQLAlchemy database handle.
    """
    with app.app_context():
        db.create_all()
        yield db
        db.session.rollback()
        db.drop_all()


@pytest.fixture
def repository(db_session) -> TaskRepository:
    """Repository bound to the test database session."""
    return TaskRepository(db_session.session)


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def task_factory(db_session):
    """
    Factory fixture for inserting Task rows directly.

    Rows go straight through the session, bypassing validation, so tests
    can seed states the API would refuse (e.g. a due date in the past).

    Args:
        db_session: Database fixture.

    Returns:
        Function that creates and returns Task instances.

    Example:
        def test_something(task_factory):
            task = task_factory(title="My Task")
            assert task.id is not None
    """

    def _create_task(
        title: str | None = None,
        description: str | None = None,
        status: TaskStatus = TaskStatus.NEW,
        due_date: datetime | None = None,
        tasknum: int | None = None,
    ) -> Task:
        task = Task(
            title=title or fake.sentence(nb_words=4)[:100],
            description=description or fake.text(max_nb_chars=150),
            status=status,
            due_date=due_date or future(),
            tasknum=tasknum,
        )
        db_session.session.add(task)
        db_session.session.commit()
        return task

    return _create_task


@pytest.fixture
def sample_task(task_factory) -> Task:
    """
    Create a single sample task for tests that need one task.

    Returns:
        A single Task instance.
    """
    return task_factory(
        title="Sample Task",
        description="This is a sample task for testing",
        status=TaskStatus.PENDING,
        due_date=future(days=3),
        tasknum=42,
    )


@pytest.fixture
def multiple_tasks(task_factory) -> list[Task]:
    """
    Create tasks with different titles, statuses and due dates.

    Useful for list, filter and search tests.

    Returns:
        List of Task instances with varied properties.
    """
    return [
        task_factory(title="Report Alpha", status=TaskStatus.PENDING, due_date=future(days=1)),
        task_factory(title="Report Beta", status=TaskStatus.IN_PROGRESS, due_date=future(days=2)),
        task_factory(title="Misc Task", status=TaskStatus.PENDING, due_date=future(days=3)),
        task_factory(title="Old Chore", status=TaskStatus.COMPLETED, due_date=past(days=2)),
    ]


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_task_data() -> dict[str, Any]:
    """
    Provide valid task data for POST/PUT requests.

    Returns:
        Dictionary with valid task field values.
    """
    return {
        "title": "Test Task",
        "description": "This is a test task description",
        "status": TaskStatus.NEW.value,
        "dueDate": future(days=7).replace(microsecond=0).isoformat(),
        "tasknum": 7,
    }


@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
