"""
Test suite for the Task Manager application.

This package contains:
- unit/: Component tests with no HTTP layer (validation, mapping,
  query predicates, service with a mocked repository)
- integration/: API tests through the Flask test client against an
  in-memory database
- smoke/: Fast liveness checks for the service endpoints
"""
