"""
Smoke tests for the task service.

Smoke tests are lightweight, fast checks that answer one question: "is
the application up and minimally functional?" They hit the service
endpoints and one create/read round trip. If any of these fail, deeper
test suites should not be attempted.
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.smoke


def test_root_welcome_message(client):
    """Test that the root URL responds with the welcome text."""
    # Act
    response = client.get("/")

    # Assert
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "Welcome to task-manager"


def test_health_endpoint(client):
    """Test that the health endpoint reports the service healthy."""
    # Act
    response = client.get("/api/health")

    # Assert
    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "healthy"
    assert "environment" in data
    assert "version" in data


def test_info_endpoint_describes_database(client):
    """Test that /api/info names the application and database dialect."""
    # Act
    response = client.get("/api/info")

    # Assert
    assert response.status_code == 200
    data = response.get_json()
    assert data["application"] == "task-manager"
    assert data["database"]["dialect"] == "sqlite"


def test_info_endpoint_masks_password(app, client, monkeypatch):
    """Test that credentials in the database URL are never exposed."""
    # Arrange
    monkeypatch.setitem(
        app.config, "SQLALCHEMY_DATABASE_URI", "postgresql://tasks:hunter2@db:5432/tasks"
    )

    # Act
    response = client.get("/api/info")

    # Assert
    database = response.get_json()["database"]
    assert database["dialect"] == "postgresql"
    assert "hunter2" not in database["url"]
    assert "***" in database["url"]


def test_create_and_fetch_round_trip(client, db_session, valid_task_data):
    """Test the critical path: create a task, then read it back."""
    # Act
    created = client.post("/api/tasks", json=valid_task_data)
    fetched = client.get(f"/api/tasks/{created.get_json()['id']}")

    # Assert
    assert created.status_code == 201
    assert fetched.status_code == 200
    assert fetched.get_json()["title"] == valid_task_data["title"]


def test_info_endpoint_reports_unparseable_url(app, client, monkeypatch):
    """Test that a broken database URL is reported rather than failing the request."""
    # Arrange
    monkeypatch.setitem(app.config, "SQLALCHEMY_DATABASE_URI", "not a database url")

    # Act
    response = client.get("/api/info")

    # Assert
    assert response.status_code == 200
    assert response.get_json()["database"] == {"status": "not-configured"}
