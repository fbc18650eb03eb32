"""
Pytest Configuration and Fixtures

Shared fixtures: a fixed clock, the workflow, services wired to in-memory
repositories, and an API client with the store-backed dependencies overridden.
"""

from datetime import datetime, timezone
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from license_tracker.config.settings import Settings
from license_tracker.domain.enums import TaskStatus, VehicleClass
from license_tracker.engine.status_workflow import StatusWorkflow
from license_tracker.services.auth_service import AuthService
from license_tracker.services.catalog_service import CatalogService
from license_tracker.services.task_service import TaskService
from license_tracker.utils.jwt import JWTService

from .fakes import FakeCatalogRepository, FakeTaskRepository, FakeUserRepository

# 10:00 on 2024-01-31 in Asia/Kolkata
FIXED_NOW = datetime(2024, 1, 31, 4, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        jwt_secret="test-secret-key-for-license-tracker-0001",
        logs_path=str(tmp_path / "logs"),
        enforce_status_catalog=True,
        auth_required=False,
    )


@pytest.fixture
def catalog_service() -> CatalogService:
    return CatalogService(
        statuses=FakeCatalogRepository(s.value for s in TaskStatus),
        vehicle_classes=FakeCatalogRepository(v.value for v in VehicleClass),
    )


@pytest.fixture
def workflow(clock, catalog_service) -> StatusWorkflow:
    return StatusWorkflow(
        is_known_status=catalog_service.is_known_status,
        timezone_name="Asia/Kolkata",
        clock=clock,
    )


@pytest.fixture
def task_repo() -> FakeTaskRepository:
    return FakeTaskRepository()


@pytest.fixture
def task_service(task_repo, workflow) -> TaskService:
    return TaskService(task_repo, workflow)


@pytest.fixture
def jwt_service(test_settings) -> JWTService:
    return JWTService(test_settings)


@pytest.fixture
def auth_service(jwt_service) -> AuthService:
    return AuthService(FakeUserRepository(), jwt_service)


@pytest.fixture
def sample_fields() -> dict:
    return {
        "applicant_name": "Ravi Kumar",
        "father_name": "Suresh Kumar",
        "dob": "1999-05-14",
        "mobile": "9876543210",
        "vehicle_class": ["LMV"],
        "declared_payment": 2500,
        "advance_payment": 1000,
        "notes": "Walk-in",
    }


@pytest.fixture
def client(test_settings, task_service, catalog_service, auth_service, jwt_service) -> Iterator[TestClient]:
    """API client; the lifespan is not started so no MongoDB is needed"""
    from license_tracker.api import deps
    from license_tracker.main import app

    app.dependency_overrides[deps.get_app_settings] = lambda: test_settings
    app.dependency_overrides[deps.get_task_service] = lambda: task_service
    app.dependency_overrides[deps.get_catalog_service] = lambda: catalog_service
    app.dependency_overrides[deps.get_auth_service] = lambda: auth_service
    app.dependency_overrides[deps.get_jwt_service] = lambda: jwt_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
