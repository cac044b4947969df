"""
Flask application factory module.

This module creates and configures the task manager application using
the factory pattern, allowing for different configurations
(development, testing, production).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

from config import get_config

# Initialize SQLAlchemy without binding to app
db = SQLAlchemy()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _ensure_sqlite_db_parent_exists(database_uri: str) -> None:
    """Create parent directories for file-based SQLite URIs when missing."""
    sqlite_prefix = "sqlite:///"
    if not database_uri.startswith(sqlite_prefix):
        return

    sqlite_path = database_uri[len(sqlite_prefix) :].split("?", 1)[0]
    if sqlite_path == ":memory:":
        return

    Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(engine: Engine) -> None:
    """
    Swap SQLite's ASCII-only ``lower()`` for one that folds all of Unicode.

    Title search compares ``lower(title)`` with a term lower-cased in
    Python, so both sides must fold the same way. Other dialects keep
    their own ``lower()``.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    logging.getLogger().setLevel(app.config.get("LOG_LEVEL", "INFO").upper())

    logger.info("Creating app with config: %s", config_class.__name__)

    os.makedirs(app.instance_path, exist_ok=True)
    _ensure_sqlite_db_parent_exists(app.config.get("SQLALCHEMY_DATABASE_URI", ""))

    # Initialize extensions
    db.init_app(app)

    # Register blueprints
    from .routes.api import api_bp
    from .routes.root import root_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(root_bp)

    # Create database tables
    with app.app_context():
        _register_sqlite_functions(db.engine)
        db.create_all()
        logger.info("Database tables created")

    return app
