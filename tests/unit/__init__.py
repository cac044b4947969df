"""Unit tests: single modules exercised without the HTTP layer."""
