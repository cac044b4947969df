"""
Routes package for the Task Manager application.

This package contains route blueprints:
- api: REST API endpoints under /api
- root: welcome page at /
"""
