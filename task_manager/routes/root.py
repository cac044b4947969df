"""Top-level routes outside the API prefix."""

from __future__ import annotations

from flask import Blueprint, Response, current_app

root_bp = Blueprint("root", __name__)


@root_bp.route("/", methods=["GET"])
def welcome() -> Response:
    """Plain-text greeting, handy as a smoke-test URL."""
    return Response(f"Welcome to {current_app.config['APP_NAME']}", mimetype="text/plain")
