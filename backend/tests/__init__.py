"""
Test Suite

Tests for the License Tracker backend. No MongoDB is required: services run
against the in-memory repositories in fakes.py and the API is exercised
through FastAPI's TestClient with dependency overrides.

Structure:
    tests/
    ├── conftest.py               # Shared fixtures
    ├── fakes.py                  # In-memory repositories
    ├── test_status_workflow.py   # Status state machine and date rules
    ├── test_task_service.py      # Task service over fake repositories
    ├── test_task_repository.py   # Mongo query and update documents
    ├── test_auth_service.py      # Registration, login, tokens
    └── test_api.py               # HTTP endpoints

To run tests:
    pytest
"""
