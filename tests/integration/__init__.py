"""
API test package for the Task Manager.

This package contains tests for the REST API endpoints.
Tests use the Flask test client and demonstrate:
- CRUD operation testing
- Input validation testing
- Search and filter testing
- Error handling testing
"""
