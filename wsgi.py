"""WSGI entry point for the task manager."""

import os

from task_manager import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))
