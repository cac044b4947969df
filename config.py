"""
Application configuration module.

This module defines configuration classes for different environments
(development, testing, production). Configuration values are loaded
from environment variables with sensible defaults.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """
    Base configuration with development-safe defaults.

    Attributes:
        SECRET_KEY: Flask session signing key.
        SQLALCHEMY_TRACK_MODIFICATIONS: Disabled to save memory.
        SQLALCHEMY_DATABASE_URI: Database connection string (default: local
            SQLite file).
        APP_NAME: Name reported by the info endpoint.
        LOG_LEVEL: Root logging level applied by the application factory.
    """

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'tasks.db'}",
    )

    APP_NAME: str = os.environ.get("APP_NAME", "task-manager")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """
    Testing environment configuration.

    Runs against an in-memory SQLite database unless ``TEST_DATABASE_URL``
    points somewhere else (e.g. a throwaway Postgres container).
    """

    DEBUG: bool = True
    TESTING: bool = True
    SQLALCHEMY_DATABASE_URI: str = os.environ.get("TEST_DATABASE_URL", "sqlite:///:memory:")
    SQLALCHEMY_ENGINE_OPTIONS: dict = {"pool_pre_ping": True}


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
