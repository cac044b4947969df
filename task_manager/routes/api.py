"""
REST API endpoints for Task management.

This module exposes the task service over HTTP. Handlers only decode
request data, call ``TaskService`` and serialise the result; every failure
is raised as an exception and mapped to a response by the error handlers
at the bottom of the module.

Endpoints:
    GET    /api/health                 - Health check
    GET    /api/info                   - Application and database details
    GET    /api/tasks                  - List all tasks
    POST   /api/tasks                  - Create a new task
    GET    /api/tasks/<id>             - Get a single task by ID
    PUT    /api/tasks/<id>             - Replace an existing task
    DELETE /api/tasks/<id>             - Delete a task
    PUT    /api/tasks/<id>/status      - Update task status only (?status=)
    GET    /api/tasks/status/<status>  - List tasks with a status
    GET    /api/tasks/overdue          - List tasks due before now
    GET    /api/tasks/statuses         - List every status name
    GET    /api/tasks/search           - Search by title, status, dueDate
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from flask import Blueprint, Response, current_app, jsonify, request
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from werkzeug.exceptions import BadRequest, HTTPException

from .. import db
from ..constants import STATUS_REQUIRED, TASK_DELETED_SUCCESS, UNEXPECTED_ERROR
from ..exceptions import (
    MalformedRequestError,
    TaskNotFoundError,
    TaskValidationError,
    TaskWriteError,
)
from ..models import TaskStatus
from ..repository import TaskRepository
from ..schemas import TaskRequest, TaskResponse
from ..service import TaskService
from ..specifications import parse_search_date

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def _service() -> TaskService:
    """Build a service bound to the current request's database session."""
    return TaskService(TaskRepository(db.session))


def _text(message: str, status_code: int) -> Response:
    return Response(message, status=status_code, mimetype="text/plain")


def _task_json(task: TaskResponse, status_code: int = 200) -> tuple[Response, int]:
    return jsonify(task.to_dict()), status_code


def _task_list_json(tasks: list[TaskResponse]) -> tuple[Response, int]:
    return jsonify([task.to_dict() for task in tasks]), 200


def _request_payload() -> TaskRequest:
    """
    Decode the JSON body into a ``TaskRequest``.

    Raises:
        MalformedRequestError: If the body is not valid JSON or does not
            have the shape of a task payload.
    """
    try:
        data = request.get_json()
    except BadRequest as exc:
        raise MalformedRequestError("body is not valid JSON") from exc
    return TaskRequest.from_json(data)


def _status_arg(raw: str | None, required: bool) -> TaskStatus | None:
    """
    Convert a status from the path or query string.

    An absent optional value gives None. An absent required value or an
    unknown name is reported as a 400 on the ``status`` field.
    """
    if raw is None or raw == "":
        if required:
            raise TaskValidationError({"status": STATUS_REQUIRED})
        return None
    status = TaskStatus.parse(raw)
    if status is None:
        valid = [s.value for s in TaskStatus]
        raise TaskValidationError({"status": f"Invalid status '{raw}'. Must be one of: {valid}"})
    return status


# -----------------------------------------------------------------------------
# Service Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "environment": os.getenv("ENVIRONMENT", "unknown"),
        "version": os.getenv("APP_VERSION", "unknown"),
    }), 200


@api_bp.route("/info", methods=["GET"])
def info() -> tuple[Response, int]:
    """
    Report the application name, environment and database in use.

    The database URL is rendered with its password masked.
    """
    database: dict[str, str | None]
    try:
        url = make_url(current_app.config["SQLALCHEMY_DATABASE_URI"])
        database = {
            "dialect": url.get_backend_name(),
            "url": url.render_as_string(hide_password=True),
        }
    except ArgumentError as exc:
        logger.warning("Unable to describe database: %s", exc)
        database = {"status": "not-configured"}

    return jsonify({
        "application": current_app.config.get("APP_NAME"),
        "environment": os.getenv("FLASK_ENV", "development"),
        "database": database,
    }), 200


# -----------------------------------------------------------------------------
# Task Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/tasks", methods=["GET"])
def get_tasks() -> tuple[Response, int]:
    """List all tasks in storage order."""
    logger.info("GET /api/tasks - Fetching all tasks")
    return _task_list_json(_service().list_all())


@api_bp.route("/tasks", methods=["POST"])
def create_task() -> tuple[Response, int]:
    """
    Create a new task.

    Request Body (JSON):
        title: Task title (required, max 100 characters)
        description: Task description (optional, max 200 characters)
        status: One of the TaskStatus names (required)
        dueDate: ISO-8601 timestamp in the future (required)
        tasknum: Optional integer

    Returns:
        JSON task with 201, or a field-error map with 400.
    """
    logger.info("POST /api/tasks - Creating new task")
    task = _service().create(_request_payload())
    return _task_json(task, 201)


@api_bp.route("/tasks/<int:task_id>", methods=["GET"])
def get_task(task_id: int) -> tuple[Response, int]:
    """Get a single task by ID."""
    logger.info("GET /api/tasks/%s - Fetching task", task_id)
    return _task_json(_service().get_by_id(task_id))


@api_bp.route("/tasks/<int:task_id>", methods=["PUT"])
def update_task(task_id: int) -> tuple[Response, int]:
    """
    Replace title, description, status and due date of a task.

    The body is validated with the same rules as create.
    """
    logger.info("PUT /api/tasks/%s - Updating task", task_id)
    payload = _request_payload()
    return _task_json(_service().update(task_id, payload))


@api_bp.route("/tasks/<int:task_id>", methods=["DELETE"])
def delete_task(task_id: int) -> Response:
    """Delete a task permanently."""
    logger.info("DELETE /api/tasks/%s - Deleting task", task_id)
    _service().delete(task_id)
    return _text(TASK_DELETED_SUCCESS, 200)


@api_bp.route("/tasks/<int:task_id>/status", methods=["PUT"])
def update_task_status(task_id: int) -> tuple[Response, int]:
    """
    Update only the status of a task.

    Query Parameters:
        status: New status name (required)
    """
    logger.info("PUT /api/tasks/%s/status - Updating status", task_id)
    status = _status_arg(request.args.get("status"), required=True)
    return _task_json(_service().update_status(task_id, status))


@api_bp.route("/tasks/status/<status>", methods=["GET"])
def get_tasks_by_status(status: str) -> tuple[Response, int]:
    """List tasks with the given status."""
    logger.info("GET /api/tasks/status/%s - Fetching tasks by status", status)
    return _task_list_json(_service().list_by_status(_status_arg(status, required=True)))


@api_bp.route("/tasks/overdue", methods=["GET"])
def get_overdue_tasks() -> tuple[Response, int]:
    """List tasks whose due date is before the current time."""
    logger.info("GET /api/tasks/overdue - Fetching overdue tasks")
    return _task_list_json(_service().list_overdue(datetime.now()))


@api_bp.route("/tasks/statuses", methods=["GET"])
def get_statuses() -> tuple[Response, int]:
    """List every status name."""
    return jsonify([status.value for status in TaskStatus]), 200


@api_bp.route("/tasks/search", methods=["GET"])
def search_tasks() -> tuple[Response, int]:
    """
    Search tasks. All criteria are optional and combined with AND.

    Query Parameters:
        title: Case-insensitive substring of the title
        status: Exact status name
        dueDate: Calendar day (YYYY-MM-DD); unparseable values are ignored
    """
    title = request.args.get("title")
    status = _status_arg(request.args.get("status"), required=False)
    due_date = parse_search_date(request.args.get("dueDate"))
    logger.info(
        "GET /api/tasks/search - title=%r status=%s dueDate=%s", title, status, due_date
    )
    return _task_list_json(_service().search(title=title, status=status, due_date=due_date))


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(TaskValidationError)
def handle_validation_error(error: TaskValidationError) -> tuple[Response, int]:
    """Return the field-error map with 400."""
    logger.warning("Validation failed: %s", error.field_errors)
    return jsonify(error.field_errors), 400


@api_bp.errorhandler(TaskNotFoundError)
def handle_not_found(error: TaskNotFoundError) -> Response:
    """Return the not-found message with 404."""
    logger.warning("%s", error)
    return _text(str(error), 404)


@api_bp.errorhandler(MalformedRequestError)
def handle_malformed_request(error: MalformedRequestError) -> Response:
    """Return a fixed message with 400; the detail only goes to the log."""
    logger.warning("Malformed request: %s", error.detail)
    return _text(str(error), 400)


@api_bp.errorhandler(TaskWriteError)
def handle_write_error(error: TaskWriteError) -> Response:
    """Return a fixed message with 500."""
    logger.error("Database write exception: %s", error.cause)
    return _text(str(error), 500)


@api_bp.errorhandler(Exception)
def handle_unexpected_error(error: Exception) -> Response | HTTPException:
    """
    Catch-all for anything not handled above.

    Werkzeug HTTP errors (405, 415, ...) pass through unchanged. Anything
    else is logged with its traceback and answered with a generic 500 that
    does not leak internals.
    """
    if isinstance(error, HTTPException):
        return error
    logger.exception("Unhandled exception: %s", error)
    return _text(UNEXPECTED_ERROR, 500)
